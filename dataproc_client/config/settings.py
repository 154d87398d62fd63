from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    api_base_url: str = "http://localhost:3000"
    process_path: str = "/bfhl"
    api_token: str = ""
    request_timeout_seconds: int = 30

    processing_provider: str = "http"

    clear_result_on_failure: bool = False
