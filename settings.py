from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from enums import ContentMode, LoadPolicy


class Settings(BaseSettings):
    """Translator settings - reads TRANSLATOR_* environment variables"""

    # Translation resources
    locales_dir: Path = Path("locales")
    resource_template: str = "{lang}.json"
    base_url: Optional[str] = None  # 설정 시 HTTP로 번역 문서를 가져옴
    http_timeout: float = 10.0

    # Page
    page_file: Path = Path("data/page.json")
    default_language: str = "en"

    # Translator behavior
    load_policy: LoadPolicy = LoadPolicy.LAST_WRITE_WINS
    content_mode: ContentMode = ContentMode.TEXT
    rollback_on_failure: bool = False

    # Logging
    log_dir: Path = Path("logs")
    log_level: str = "DEBUG"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("resource_template")
    @classmethod
    def check_template(cls, v: str) -> str:
        if "{lang}" not in v:
            raise ValueError("resource_template must contain '{lang}'")
        return v

    model_config = SettingsConfigDict(
        env_prefix="TRANSLATOR_",
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


settings = Settings()
