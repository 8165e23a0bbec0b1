from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional, Union
from pydantic import field_validator
import json


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # API Settings
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Site CMS API"
    ENVIRONMENT: str = "development"
    HOST: str = "0.0.0.0"
    PORT: int = 3002

    # Logging
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = False

    # Database Settings
    POSTGRES_USER: str = "user"
    POSTGRES_PASSWORD: str = "password"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: str = "5432"
    POSTGRES_DB: str = "sitecms"

    # Full connection string, takes precedence over the POSTGRES_* parts
    DATABASE_URL: Optional[str] = None

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # CORS Settings - can be set as JSON string in .env
    BACKEND_CORS_ORIGINS: Union[List[str], str] = [
        "http://localhost:5173",
        "http://localhost:5174",
        "http://localhost:3000",
    ]
    FRONTEND_URL: Optional[str] = None

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Union[List[str], str]) -> List[str]:
        """Parse CORS origins from JSON string or list"""
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                # If not valid JSON, split by comma
                return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @property
    def cors_origins(self) -> List[str]:
        origins = list(self.BACKEND_CORS_ORIGINS)
        if self.FRONTEND_URL and self.FRONTEND_URL not in origins:
            origins.append(self.FRONTEND_URL)
        return origins

    # Upload Settings
    STORAGE_BACKEND: str = "local"  # "local" or "s3"
    UPLOAD_DIR: str = "public/uploads"
    UPLOAD_URL_PREFIX: str = "/uploads"
    MAX_UPLOAD_SIZE_MB: int = 5
    MAX_RESUME_SIZE_MB: int = 10

    # AWS S3 Settings (STORAGE_BACKEND=s3)
    S3_BUCKET_NAME: str = ""
    S3_KEY_PREFIX: str = "uploads"
    S3_PUBLIC_BASE_URL: str = ""  # CDN in front of the bucket, if any
    AWS_ACCESS_KEY_ID: str = ""
    AWS_SECRET_ACCESS_KEY: str = ""
    AWS_REGION: str = "us-east-1"

    # Email Settings
    EMAIL_PROVIDER: str = ""  # "resend", "smtp", or empty to pick from credentials
    EMAIL_FROM_ADDRESS: str = "noreply@example.com"
    EMAIL_FROM_NAME: str = "Website"
    RESEND_API_KEY: str = ""
    SMTP_HOST: str = ""
    SMTP_PORT: int = 587
    SMTP_USER: str = ""
    SMTP_PASSWORD: str = ""
    SMTP_SECURE: bool = False  # True for implicit TLS (port 465)

    # Admin account (seed script) and notification recipient
    ADMIN_EMAIL: str = "admin@example.com"
    ADMIN_PASSWORD: str = "password"
    NOTIFICATION_EMAIL: str = ""

    @property
    def notification_recipient(self) -> str:
        return self.NOTIFICATION_EMAIL or self.ADMIN_EMAIL

    # "discard" drops the resume after the application email is sent,
    # "keep" stores it through the upload storage backend first
    RESUME_RETENTION: str = "discard"

    @field_validator("STORAGE_BACKEND", "EMAIL_PROVIDER", "RESUME_RETENTION", mode="before")
    @classmethod
    def normalize_choice(cls, v: str) -> str:
        return v.strip().lower() if isinstance(v, str) else v

    @property
    def max_upload_bytes(self) -> int:
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024

    @property
    def max_resume_bytes(self) -> int:
        return self.MAX_RESUME_SIZE_MB * 1024 * 1024


settings = Settings()
