from pathlib import Path
import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8013
NOTES_FILENAME = "notes.txt"
BACKUP_DIRNAME = "notes_backups"


class Settings(BaseSettings):
    notes_dir: Path = Path.home()
    notes_port: int = DEFAULT_PORT
    notes_host: str = "0.0.0.0"
    notes_log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore", "frozen": True}

    @field_validator("notes_dir", mode="before")
    @classmethod
    def validate_notes_dir(cls, v):
        # Пустая переменная окружения означает значение по умолчанию
        if v is None or (isinstance(v, str) and not v.strip()):
            return Path.home()
        return v

    @field_validator("notes_port", mode="before")
    @classmethod
    def validate_notes_port(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_PORT
        try:
            return int(v)
        except (TypeError, ValueError):
            logger.warning(f"Invalid port number '{v}', using default port {DEFAULT_PORT}")
            return DEFAULT_PORT

    @property
    def notes_file(self) -> Path:
        """Путь к файлу заметок"""
        return self.notes_dir / NOTES_FILENAME

    @property
    def backup_dir(self) -> Path:
        """Каталог резервных копий"""
        return self.notes_dir / BACKUP_DIRNAME


def get_settings() -> Settings:
    """Чтение настроек из окружения"""
    return Settings()
