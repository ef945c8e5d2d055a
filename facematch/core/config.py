"""Configuration settings for the descriptor matching service."""
from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    These settings are loaded from environment variables with the following precedence:
    1. Environment variables
    2. .env file
    3. Default values

    Thresholds here are host policy. The engine functions always receive the
    threshold as an argument; only the API, CLI and services read these defaults.

    Attributes:
        DESCRIPTOR_DIMENSION: Length of descriptors produced by the embedding model
        VERIFICATION_THRESHOLD: Maximum distance for one-to-one verification
        MATCH_THRESHOLD: Maximum distance for gallery lookup
        GROUPING_THRESHOLD: Maximum distance to a cluster representative
    """
    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="",
        env_nested_delimiter="__"
    )

    # Core Settings
    PROJECT_NAME: str = "Face Descriptor Engine"
    VERSION: str = "0.1.0"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: str = "development"

    # CORS Settings
    ALLOWED_ORIGINS: str = "http://localhost:3000"

    @property
    def cors_origins(self) -> List[str]:
        """Get list of allowed origins."""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    # Descriptor Settings
    DESCRIPTOR_DIMENSION: int = 128

    # Decision thresholds (Euclidean distance, strict "<")
    VERIFICATION_THRESHOLD: float = 0.5
    MATCH_THRESHOLD: float = 0.6
    GROUPING_THRESHOLD: float = 0.6

    # Gallery Settings
    UNKNOWN_LABEL: str = "unknown"
    GALLERY_AGGREGATION: Literal["nearest", "mean"] = "nearest"

    # Optional settings with defaults
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8000

settings = Settings()
