"""Configuration management using Pydantic Settings"""

from decimal import Decimal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./spendwise.db"

    # Service
    service_name: str = "spendwise-engine"
    log_level: str = "INFO"

    # Billing cycle
    cycle_start_day: int = Field(default=17, ge=1, le=31)

    # Analytics
    monthly_income: Decimal = Decimal("5000")
    default_category_budget: Decimal = Decimal("1000")
    monthly_trend_months: int = Field(default=5, ge=0)
    top_categories_count: int = Field(default=3, ge=0)


settings = Settings()
