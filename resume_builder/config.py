"""
Configuration management for the Resume Builder API
Loads settings from environment variables
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
import json


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Database
    DATABASE_URL: str

    # Security
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # API Configuration
    API_V1_PREFIX: str = "/api"
    PROJECT_NAME: str = "Resume Builder API"
    VERSION: str = "1.0.0"

    # CORS
    BACKEND_CORS_ORIGINS: str = '["http://localhost:3000", "http://localhost:3035", "http://localhost:3037"]'

    # Admin
    ADMIN_EMAIL: str = "admin@resumebuilder.com"
    ADMIN_PASSWORD: str = "Admin@123"

    # Expert review payments
    REVIEW_PRICE: float = 249.0
    PAYMENT_VERIFICATION_MODE: str = "strict"  # 'strict' or 'trust'
    ALLOWED_PAYMENT_METHODS: str = "card,upi,netbanking,wallet"

    # Pagination
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    # Seed the experts table on startup
    SEED_EXPERTS: bool = True

    # Application
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow"
    )

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS origins from JSON string"""
        try:
            return json.loads(self.BACKEND_CORS_ORIGINS)
        except ValueError:
            return ["http://localhost:3000"]

    @property
    def allowed_payment_methods_list(self) -> List[str]:
        """Get allowed payment methods as a list"""
        return [method.strip().lower() for method in self.ALLOWED_PAYMENT_METHODS.split(',') if method.strip()]


# Global settings instance
settings = Settings()
