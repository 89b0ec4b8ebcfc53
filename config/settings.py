"""Settings configuration using pydantic-settings for environment variable management."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    MONGODB_URL: str = "mongodb://localhost:27017"
    DATABASE_NAME: str = "taskflow"

    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"

    BCRYPT_ROUNDS: int = 12

    CORS_ORIGINS: str = "http://localhost:5173"

    HOST: str = "0.0.0.0"
    PORT: int = 5000

    APP_NAME: str = "Taskflow"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    @field_validator("JWT_SECRET")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        """Refuse to run with a blank signing secret."""
        if not v or not v.strip():
            raise ValueError("JWT_SECRET must be set to a non-empty value")
        return v

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """Keep the bcrypt work factor at 10 rounds or more."""
        if v < 10 or v > 31:
            raise ValueError("BCRYPT_ROUNDS must be between 10 and 31")
        return v

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def validate_origins(cls, v):
        """Validate and clean origins string."""
        if isinstance(v, str):
            return v.strip()
        return v

    def get_cors_origins(self) -> list[str]:
        """
        Parse comma-separated origins into a list.

        Returns:
            List of allowed origins (e.g., ['https://app.example.com', 'http://localhost:5173'])
        """
        if not self.CORS_ORIGINS:
            return []
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]
