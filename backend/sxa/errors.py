"""
Error taxonomy shared by the engine, the stores and the HTTP layer
"""


class SXAError(Exception):
    """Base exception; status_code is the HTTP status the API answers with"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SXAError):
    """A required field is missing or a value is not acceptable"""

    status_code = 400


class NotFoundError(SXAError):
    """The requested session or athlete does not exist"""

    status_code = 404


class PayloadTooLargeError(SXAError):
    status_code = 413


class DependencyUnavailableError(SXAError):
    """An optional backing component is not configured in this deployment"""

    status_code = 503


class PersistenceError(SXAError):
    """A storage read or write failed"""

    status_code = 500
