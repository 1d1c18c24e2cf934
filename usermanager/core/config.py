"""Application configuration"""
from pydantic_settings import BaseSettings
from typing import Optional
from urllib.parse import quote_plus


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Database Configuration (separate fields)
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_USER: str = "root"
    DB_PASSWORD: str = "password"
    DB_NAME: str = "user_manager"

    # Full SQLAlchemy async URL; overrides the separate fields when set
    DB_URL: Optional[str] = None

    @property
    def DATABASE_URL(self) -> str:
        """Construct async database URL from separate fields"""
        if self.DB_URL:
            return self.DB_URL
        password = quote_plus(self.DB_PASSWORD)
        return f"mysql+aiomysql://{self.DB_USER}:{password}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    @property
    def DATABASE_URL_SYNC(self) -> str:
        """Construct sync database URL for Alembic"""
        password = quote_plus(self.DB_PASSWORD)
        return f"mysql+pymysql://{self.DB_USER}:{password}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # HTTP server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Application
    API_PREFIX: str = ""
    PROJECT_NAME: str = "User Manager"
    DEBUG: bool = False

    # Pre-built client bundle served at "/"
    STATIC_DIR: str = "./public"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields in .env that aren't defined in Settings


# Global settings instance
settings = Settings()
