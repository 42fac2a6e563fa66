"""Configuration management using Pydantic Settings"""

from decimal import Decimal

from pydantic import Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from meal_topup.domain.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", frozen=True
    )

    # Top-up calculation
    payment_day_in_month: int = Field(..., ge=1, le=31)
    price_per_meal: Decimal = Field(..., gt=0)
    holiday_country: str = "NO"
    holiday_subdivision: str | None = None

    # Account portal
    account_url: str = "http://localhost:8001/"
    account_username: str = ""
    account_password: SecretStr = SecretStr("")
    portal_timeout_seconds: float = 30.0
    report_timeout_seconds: float = 60.0

    # Service
    service_name: str = "meal-topup"
    log_level: str = "INFO"
    webserver_port: int = 3000


def load_settings() -> Settings:
    """
    Load and validate settings once at process start.

    Raises:
        ConfigurationError: If a required value is missing or out of range
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


settings = load_settings()
