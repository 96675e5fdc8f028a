from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, List, Optional
import logging

from notes_app.domains.notes.entities import (
    BACKUP_SUFFIX, BackupEntry, is_safe_backup_path, is_valid_backup_name
)
from notes_app.domains.notes.exceptions import (
    BackupNotFoundError, BackupSkipped, DocumentIOError, InvalidBackupNameError
)

logger = logging.getLogger(__name__)

BACKUP_RETENTION = timedelta(hours=1)


class BackupRepository:
    """Репозиторий резервных копий в каталоге notes_backups"""

    def __init__(
        self,
        backup_dir: Path,
        clock: Optional[Callable[[], datetime]] = None
    ):
        self.backup_dir = backup_dir
        self.clock = clock or datetime.now

    def snapshot_and_prune(self, previous_content: bytes) -> BackupEntry:
        """Сохранение предыдущего содержимого и удаление устаревших копий"""
        now = self.clock()

        try:
            self.backup_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise BackupSkipped(f"Cannot create backup directory {self.backup_dir}: {e}") from e

        backup = BackupEntry.create_backup(previous_content, now)
        try:
            # Копия за ту же секунду перезаписывается
            (self.backup_dir / backup.name).write_bytes(backup.content)
        except OSError as e:
            raise BackupSkipped(f"Cannot write backup {backup.name}: {e}") from e
        logger.info(f"Created backup {backup.name}")

        self.prune(now)
        return backup

    def prune(self, now: datetime) -> int:
        """Удаление копий старше окна хранения, ошибки удаления игнорируются"""
        cutoff = (now - BACKUP_RETENTION).timestamp()
        removed = 0

        try:
            entries = list(self.backup_dir.iterdir())
        except OSError as e:
            logger.debug(f"Cannot list backup directory {self.backup_dir}: {e}")
            return removed

        for entry in entries:
            try:
                if not entry.is_file() or entry.stat().st_mtime >= cutoff:
                    continue
                entry.unlink()
            except OSError as e:
                logger.debug(f"Cannot remove old backup {entry.name}: {e}")
                continue
            removed += 1
            logger.debug(f"Removed old backup {entry.name}")

        return removed

    def list_names(self) -> List[str]:
        """Имена резервных копий, новые первыми"""
        try:
            entries = list(self.backup_dir.iterdir())
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.warning(f"Cannot list backup directory {self.backup_dir}: {e}")
            return []

        names = sorted(
            entry.name for entry in entries
            if entry.name.endswith(BACKUP_SUFFIX) and entry.is_file()
        )
        names.reverse()
        return names

    def list_backups(self) -> List[BackupEntry]:
        """Каталог резервных копий без содержимого"""
        return [BackupEntry(name=name) for name in self.list_names()]

    def validate(self, name: str) -> bool:
        return is_valid_backup_name(name)

    def read(self, name: str) -> BackupEntry:
        """Чтение резервной копии по имени"""
        if not is_safe_backup_path(name):
            raise InvalidBackupNameError("Invalid backup filename")
        if not self.validate(name):
            raise InvalidBackupNameError("Invalid backup file type")

        path = self.backup_dir / name
        if not path.is_file():
            raise BackupNotFoundError("Backup file not found")

        try:
            content = path.read_bytes()
        except FileNotFoundError as e:
            raise BackupNotFoundError("Backup file not found") from e
        except OSError as e:
            raise DocumentIOError(f"Error reading backup file: {e}") from e

        return BackupEntry(name=name, content=content)
