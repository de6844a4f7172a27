from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str | None = None

    detector_timeout_seconds: float = 2.0
    html_sanitizer_backend: str = "bleach"
    uri_base_origin: str = "http://localhost"

    min_input_chars: int = 5
    max_input_chars: int = 10000

    history_enabled: bool = False
    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "piimask"
    db_username: str = "piimask"
    db_password: str = "secret"
    db_connect_timeout_seconds: int = 5
    db_pool_min_size: int = 1
    db_pool_max_size: int = 4
    db_pool_timeout_seconds: float = 5.0

    def resolved_log_level(self) -> str:
        """Explicit LOG_LEVEL wins; otherwise production is quiet and everything else verbose."""
        if self.log_level:
            return self.log_level.upper()
        return "WARNING" if self.app_env.lower() == "production" else "DEBUG"
