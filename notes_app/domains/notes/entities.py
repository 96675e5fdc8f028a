import re
from datetime import datetime
from pathlib import Path
from typing import Optional

BACKUP_PREFIX = "notes_"
BACKUP_SUFFIX = ".bak"
BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
LAST_MODIFIED_FORMAT = "%Y-%m-%d %H:%M:%S"

_BACKUP_NAME_RE = re.compile(r"^notes_(\d{8}_\d{6})\.bak$")


def format_timestamp(value: Optional[datetime]) -> str:
    """Форматирование времени последнего сохранения"""
    if value is None:
        return ""
    return value.strftime(LAST_MODIFIED_FORMAT)


def format_short_label(value: datetime) -> str:
    return f"{value:%b} {value.day}, {value.year} at {value:%H:%M:%S}"


def format_long_label(value: datetime) -> str:
    return f"{value:%B} {value.day}, {value.year} at {value:%H:%M:%S}"


class Document:
    """Сущность текущего документа заметок"""

    def __init__(
        self,
        path: Path,
        content: bytes = b"",
        last_modified: Optional[datetime] = None
    ):
        self.path = path
        self.content = content
        self.last_modified = last_modified

    @property
    def text(self) -> str:
        """Содержимое документа в виде текста"""
        return self.content.decode("utf-8", errors="replace")

    @property
    def last_modified_label(self) -> str:
        return format_timestamp(self.last_modified)

    def get_content_length(self) -> int:
        """Получение длины содержимого документа"""
        return len(self.text)

    def get_word_count(self) -> int:
        """Подсчет количества слов в документе"""
        if not self.text.strip():
            return 0
        return len(self.text.split())

    def __repr__(self) -> str:
        return f"Document(path={self.path}, last_modified={self.last_modified_label})"


class BackupEntry:
    """Сущность резервной копии документа"""

    def __init__(
        self,
        name: str,
        content: bytes = b"",
        created_at: Optional[datetime] = None
    ):
        self.name = name
        self.content = content
        self.created_at = created_at if created_at is not None else parse_backup_timestamp(name)

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    @property
    def label(self) -> str:
        """Короткая подпись для списка резервных копий"""
        timestamp = parse_backup_timestamp(self.name)
        return format_short_label(timestamp) if timestamp else self.name

    @property
    def long_label(self) -> str:
        """Полная подпись для просмотра резервной копии"""
        timestamp = parse_backup_timestamp(self.name)
        return format_long_label(timestamp) if timestamp else self.name

    @classmethod
    def create_backup(cls, content: bytes, now: datetime) -> "BackupEntry":
        """Создание новой резервной копии"""
        return cls(
            name=make_backup_name(now),
            content=content,
            created_at=now.replace(microsecond=0)
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, BackupEntry):
            return False
        return self.name == other.name

    def __repr__(self) -> str:
        return f"BackupEntry(name={self.name})"


def make_backup_name(now: datetime) -> str:
    """Имя файла резервной копии по времени создания"""
    return f"{BACKUP_PREFIX}{now.strftime(BACKUP_TIMESTAMP_FORMAT)}{BACKUP_SUFFIX}"


def parse_backup_timestamp(name: str) -> Optional[datetime]:
    """Разбор времени из имени резервной копии, None если имя не по шаблону"""
    match = _BACKUP_NAME_RE.match(name)
    if not match:
        return None
    try:
        return datetime.strptime(match.group(1), BACKUP_TIMESTAMP_FORMAT)
    except ValueError:
        return None


def is_safe_backup_path(name: str) -> bool:
    """Проверка имени на выход за пределы каталога копий"""
    if not name:
        return False
    return not ("/" in name or "\\" in name or ".." in name or "\x00" in name)


def is_valid_backup_name(name: str) -> bool:
    return is_safe_backup_path(name) and name.endswith(BACKUP_SUFFIX)
