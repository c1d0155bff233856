from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    table_name: str
    log_level: str = "INFO"

    aws_region: str | None = None
    dynamodb_endpoint_url: str | None = None
