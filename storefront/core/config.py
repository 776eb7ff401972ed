# Standard library imports
import os
from typing import Final, List, Optional


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults,
    except the JWT secret which must be provided explicitly.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "storefront")
        self.mongo_timeout_ms: Final[int] = int(os.getenv("MONGO_TIMEOUT_MS", "10000"))
        self.mongo_ensure_indexes: Final[bool] = os.getenv("MONGO_ENSURE_INDEXES", "true").lower() in ("1", "true", "yes")
        self.mongo_operation_timeout_seconds: Final[float] = float(
            os.getenv("MONGO_OPERATION_TIMEOUT_SECONDS", "10")
        )

        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440")
        )

        # Password hashing
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "10"))
        self.password_min_length: Final[int] = int(os.getenv("PASSWORD_MIN_LENGTH", "6"))

        # Payment processor (Stripe)
        self.stripe_secret_key: Final[str] = os.getenv("STRIPE_SECRET_KEY", "")
        self.stripe_api_base: Final[str] = os.getenv("STRIPE_API_BASE", "https://api.stripe.com")
        self.payment_currency: Final[str] = os.getenv("PAYMENT_CURRENCY", "inr")
        self.payment_description: Final[str] = os.getenv("PAYMENT_DESCRIPTION", "Supermarket payment")
        self.payment_timeout_seconds: Final[float] = float(os.getenv("PAYMENT_TIMEOUT_SECONDS", "30"))

        # HTTP
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:3001").split(",")
            if origin.strip()
        ]
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        self.port: Final[int] = int(os.getenv("PORT", "3001"))

    def validate(self) -> None:
        """
        Fail fast on configuration the service cannot run without.

        Raises:
            RuntimeError: If the JWT signing secret is missing
        """
        if not self.jwt_secret_key:
            raise RuntimeError("JWT_SECRET_KEY is not set. Configure it in the environment or .env file.")


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
