from pydantic_settings import BaseSettings, SettingsConfigDict


PLUGIN_VERSION = "1.0.0"


class Settings(BaseSettings):
    # pydantic v2: ignore unknown env vars (e.g., ENV), load from .env
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
    app_name: str = "suspicious-code-unlock"
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "info"
    # File logging options (JSON lines)
    log_file_enabled: bool = False
    log_dir: str = "logs"
    log_file_name: str = "server.log"
    log_max_bytes: int = 10_000_000
    log_backup_count: int = 5
    log_utc: bool = True

    # Plugin config + permission grants live here
    config_dir: str = "config"

    # Fallback when the plugin config has no webhook url (env: DISCORD_WEBHOOK_URL)
    discord_webhook_url: str = ""
    webhook_timeout_sec: float = 10.0

    default_language: str = "en"


settings = Settings()
