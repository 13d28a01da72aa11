from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    backend_url: str = "https://sleep-apnea-detection-using-ecg-signals.onrender.com"

    classification_provider: str = "http"
    classification_timeout_seconds: float = 30.0

    probe_timeout_seconds: float = 10.0
    wake_poll_interval_seconds: float = 3.0

    session_file: str = ""
