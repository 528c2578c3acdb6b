from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv(".env")


class Settings(BaseSettings):
    app_name: str = "Book Tracker API"
    version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    seed_books: bool = True
    cors_origins: str = ""
    otel_enabled: bool = False
    otel_endpoint: str = "http://otel-collector:4318"
    otel_service_name: str = "book-tracker"

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def get_settings() -> Settings:
    settings = Settings()
    if not 0 < settings.port < 65536:
        raise RuntimeError(f"APP_PORT out of range: {settings.port}")
    if settings.log_level.upper() not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
        raise RuntimeError(f"Unknown APP_LOG_LEVEL: {settings.log_level}")
    return settings
