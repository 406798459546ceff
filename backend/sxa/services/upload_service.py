"""
Local video upload storage
"""

import os
import uuid
from dataclasses import dataclass
from typing import List

from fastapi import UploadFile

from sxa.errors import DependencyUnavailableError, PayloadTooLargeError, ValidationError
from sxa.utils.logger import get_logger

logger = get_logger(__name__)

CHUNK_SIZE = 1024 * 1024


@dataclass
class StoredVideo:
    """A video written to the upload directory"""
    filename: str
    path: str
    size: int


class LocalUploadStorage:
    """Stores uploads on disk as <uuid><ext>; the files are never read back by the engine"""

    available = True

    def __init__(self, upload_dir: str, allowed_extensions: List[str], max_file_size: int):
        self.upload_dir = os.path.abspath(upload_dir)
        self.allowed_extensions = [ext.lower() for ext in allowed_extensions]
        self.max_file_size = max_file_size
        os.makedirs(self.upload_dir, exist_ok=True)
        logger.info(f"Upload storage ready at {self.upload_dir} (max {max_file_size / (1024 * 1024):.0f}MB)")

    def validate_filename(self, filename: str) -> str:
        """Return the lower-cased extension, or raise for unsupported types"""
        ext = os.path.splitext(filename or "")[1].lower()
        if ext not in self.allowed_extensions:
            raise ValidationError(
                f"Unsupported file type: {ext or 'none'}. Allowed: {', '.join(self.allowed_extensions)}"
            )
        return ext

    async def save(self, upload: UploadFile) -> StoredVideo:
        ext = self.validate_filename(upload.filename)
        filename = f"{uuid.uuid4()}{ext}"
        path = os.path.join(self.upload_dir, filename)

        size = 0
        try:
            with open(path, "wb") as out:
                while True:
                    chunk = await upload.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > self.max_file_size:
                        raise PayloadTooLargeError(
                            f"File too large. Max size is {self.max_file_size // (1024 * 1024)}MB."
                        )
                    out.write(chunk)
        except BaseException:
            if os.path.exists(path):
                os.remove(path)
            raise

        logger.info(f"Stored upload {upload.filename} as {filename} ({size / (1024 * 1024):.1f}MB)")
        return StoredVideo(filename=filename, path=path, size=size)


class UnavailableUploadStorage:
    """Stand-in used when uploads are disabled or the upload directory is unusable"""

    available = False
    reason = "File upload unavailable. Enable UPLOADS_ENABLED and set a writable UPLOAD_DIR."

    async def save(self, upload: UploadFile) -> StoredVideo:
        raise DependencyUnavailableError(self.reason)
