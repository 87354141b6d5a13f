from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RELATIME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Languages
    default_language: str = "en"
    fallback_language: str = "en"

    # Translations (bundled tables when unset)
    translations_dir: Path | None = None

    # Logging
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


settings = Settings()
