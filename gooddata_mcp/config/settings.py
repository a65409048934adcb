from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    gooddata_host: str
    gooddata_token: str
    gooddata_workspace: str
    gooddata_notification_channel: str

    http_timeout_seconds: float = 30.0

    export_max_poll_attempts: int = 10
    export_poll_interval_seconds: float = 3.0

    render_scale: float = 3.0
