"""
Base configuration settings
"""

import os
from typing import List, Optional
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Base settings configuration"""

    # Application settings
    APP_NAME: str = "SXA API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False

    # API settings
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 4000
    CORS_ORIGINS_STR: str = "http://localhost:5173,http://localhost:3000"

    # Database settings
    DATABASE_URL: str = "sqlite:///./db/sxa.sqlite"
    PERSISTENCE_ENABLED: bool = True

    # File upload settings
    UPLOADS_ENABLED: bool = True
    UPLOAD_DIR: str = "./uploads"
    MAX_FILE_SIZE_MB: int = 100
    ALLOWED_EXTENSIONS_STR: str = ".mp4,.mov,.avi,.webm,.mkv"

    # Analysis settings
    SCORING_MODE: str = "auto"  # auto | placeholder | metrics
    PLACEHOLDER_SEED: Optional[int] = None
    DEFAULT_SESSION_LIMIT: int = 20

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "sxa.log"

    @property
    def CORS_ORIGINS(self) -> List[str]:
        """Parse allowed CORS origins from string"""
        origins_str = os.getenv('CORS_ORIGINS', self.CORS_ORIGINS_STR)
        return [origin.strip() for origin in origins_str.split(',') if origin.strip()]

    @property
    def ALLOWED_EXTENSIONS(self) -> List[str]:
        """Parse allowed extensions from string"""
        ext_str = os.getenv('ALLOWED_EXTENSIONS', self.ALLOWED_EXTENSIONS_STR)
        return [ext.strip().lower() for ext in ext_str.split(',') if ext.strip()]

    @property
    def MAX_FILE_SIZE(self) -> int:
        """Upload limit in bytes"""
        return self.MAX_FILE_SIZE_MB * 1024 * 1024

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
        "extra": "ignore"  # Ignore extra fields from .env
    }


# Create settings instance
settings = Settings()
