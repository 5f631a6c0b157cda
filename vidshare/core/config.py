from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database Configuration - any SQLAlchemy URL, SQLite by default
    DATABASE_URL: str = "sqlite:///./videoapp.db"

    # JWT Authentication
    SECRET_KEY: str = "your-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24  # 24 hours, no refresh flow

    # Password hashing cost (bcrypt log rounds)
    BCRYPT_ROUNDS: int = 10

    # Media storage
    UPLOAD_DIR: str = "uploads"
    MAX_UPLOAD_SIZE_MB: int = 100
    UPLOAD_CHUNK_SIZE: int = 1024 * 1024

    # Frontend assets (index.html, scripts, styles) are served from here
    FRONTEND_DIR: str = "frontend"

    # HTTP
    CORS_ORIGINS: List[str] = ["*"]
    HOST: str = "0.0.0.0"
    PORT: int = 3001

    LOG_LEVEL: str = "INFO"

    @property
    def MAX_UPLOAD_SIZE_BYTES(self) -> int:
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024

    class Config:
        env_file = ".env"
        env_file_encoding = 'utf-8'
        extra = 'ignore'

settings = Settings()
