"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from cardcycle_gateway.domain.models import DueDateRule


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "cardcycle-gateway"
    log_level: str = "INFO"

    # Billing
    due_date_rule: DueDateRule = DueDateRule.NEXT_MONTH_IF_BEFORE_CLOSING

    # Recurrence
    max_recurring_instances: int = 24  # 2 years of monthly occurrences per request


settings = Settings()
