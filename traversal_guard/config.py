"""Environment-based configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TRAVERSAL_GUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API
    app_name: str = "Traversal-safe Path API"
    debug: bool = False
    host: str = "127.0.0.1"
    port: int = 3000

    # Rejection logging
    log_rejected_paths: bool = True
    log_path_max_chars: int = 200


settings = Settings()
