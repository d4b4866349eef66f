from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Resume Section Parser"
    version: str = "0.1.0"
    log_level: str = "INFO"

    # Uploads and text bodies above this size are rejected (413)
    max_upload_bytes: int = 1_000_000
    text_encoding: str = "utf-8"

    model_config = SettingsConfigDict(
        env_prefix="RESUME_PARSER_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
