from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple
import logging
import os
import tempfile

from notes_app.domains.notes.entities import Document
from notes_app.domains.notes.exceptions import DocumentIOError

logger = logging.getLogger(__name__)


class DocumentRepository:
    """Репозиторий для работы с файлом заметок"""

    def __init__(self, path: Path):
        self.path = path

    def exists(self) -> bool:
        """Проверка существования файла заметок"""
        return self.path.is_file()

    def read(self) -> Tuple[bytes, bool]:
        """Чтение содержимого, при отсутствии файл создается пустым"""
        if not self.path.exists():
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.write_bytes(b"")
            except OSError as e:
                raise DocumentIOError(f"Error reading notes file: {e}") from e
            logger.info(f"Created empty notes file {self.path}")
            return b"", False

        try:
            return self.path.read_bytes(), True
        except OSError as e:
            raise DocumentIOError(f"Error reading notes file: {e}") from e

    def write(self, content: bytes) -> None:
        """Замена содержимого через временный файл"""
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # Свой временный файл на каждую запись, побеждает последний os.replace
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=self.path.name + ".", suffix=".tmp"
            )
            tmp_path = Path(tmp_name)
            with os.fdopen(fd, "wb") as f:
                f.write(content)
            os.chmod(tmp_path, 0o644)
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise DocumentIOError(f"Error writing notes file: {e}") from e

    def stat_last_modified(self) -> Optional[datetime]:
        """Время последнего изменения файла"""
        try:
            return datetime.fromtimestamp(self.path.stat().st_mtime)
        except OSError:
            return None

    def get(self) -> Document:
        """Получение документа вместе со временем изменения"""
        content, _ = self.read()
        return Document(
            path=self.path,
            content=content,
            last_modified=self.stat_last_modified()
        )
