"""Configuration management using pydantic-settings."""

from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from subedit.exceptions import ConfigurationError

_ENV_FILES = (".env", "../.env")


def _resolve_path(value: str) -> str:
    raw = str(value or "").strip()
    if not raw:
        return raw
    p = Path(raw)
    if p.is_absolute():
        return str(p)
    return str((Path.cwd() / p).resolve())


class DocumentDefaults(BaseSettings):
    """Values used when creating a fresh document or event."""

    model_config = SettingsConfigDict(
        env_prefix="DOCUMENT_",
        env_file=_ENV_FILES,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    title: str = "Untitled"
    original_script: str = "Unknown"
    play_res_x: int = Field(default=1920, ge=1)
    play_res_y: int = Field(default=1080, ge=1)
    new_event_duration_ms: int = Field(default=3000, gt=0)
    new_event_text: str = "New subtitle"


class StorageSettings(BaseSettings):
    """Text encoding used when reading and writing subtitle files."""

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_",
        env_file=_ENV_FILES,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    encoding: str = "utf-8"
    newline: str = "\n"
    strip_bom: bool = True

    @model_validator(mode="after")
    def _validate_newline(self) -> "StorageSettings":
        if self.newline not in {"\n", "\r\n"}:
            raise ConfigurationError("STORAGE_NEWLINE must be '\\n' or '\\r\\n'")
        return self


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=_ENV_FILES,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
    console: bool = True
    file: str | None = None
    max_bytes: int = Field(default=10 * 1024 * 1024, ge=0)
    backup_count: int = Field(default=5, ge=0)


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILES, env_file_encoding="utf-8", extra="ignore"
    )

    log_dir: str = "./logs"

    document: DocumentDefaults = DocumentDefaults()
    storage: StorageSettings = StorageSettings()
    logging: LoggingSettings = LoggingSettings()

    @model_validator(mode="after")
    def _resolve_paths(self) -> "Settings":
        self.log_dir = _resolve_path(self.log_dir)
        return self
