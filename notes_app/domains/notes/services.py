from datetime import datetime
from typing import Callable, List, Optional
import logging

from notes_app.config import Settings
from notes_app.domains.notes.entities import BackupEntry, Document
from notes_app.domains.notes.exceptions import BackupSkipped, DocumentIOError
from notes_app.storage.repositories import BackupRepository, DocumentRepository

logger = logging.getLogger(__name__)


class BackupService:
    """Сервис для просмотра резервных копий"""

    def __init__(self, backup_repository: BackupRepository):
        self.backup_repository = backup_repository

    def list_backups(self) -> List[BackupEntry]:
        """Получение списка резервных копий, новые первыми"""
        return self.backup_repository.list_backups()

    def get_backup(self, name: str) -> BackupEntry:
        """Получение резервной копии по имени"""
        return self.backup_repository.read(name)


class NoteService:
    """Сервис для работы с документом заметок"""

    def __init__(
        self,
        settings: Settings,
        clock: Optional[Callable[[], datetime]] = None
    ):
        self.settings = settings
        self.document_repository = DocumentRepository(settings.notes_file)
        self.backup_repository = BackupRepository(settings.backup_dir, clock=clock)
        self.backups = BackupService(self.backup_repository)

    def get_document(self) -> Document:
        """Получение документа, при первом обращении он создается пустым"""
        return self.document_repository.get()

    def save_document(self, content: str) -> Document:
        """Сохранение документа с резервной копией предыдущего содержимого"""
        data = content.encode("utf-8")

        # Копия делается только если документ уже существовал
        if self.document_repository.exists():
            self._backup_current()

        self.document_repository.write(data)

        return Document(
            path=self.settings.notes_file,
            content=data,
            last_modified=self.document_repository.stat_last_modified()
        )

    def restore_backup(self, name: str) -> Document:
        """Восстановление документа из резервной копии"""
        backup = self.backups.get_backup(name)
        logger.info(f"Restoring notes from backup {backup.name}")
        return self.save_document(backup.text)

    def list_backups(self) -> List[BackupEntry]:
        return self.backups.list_backups()

    def get_backup(self, name: str) -> BackupEntry:
        return self.backups.get_backup(name)

    def _backup_current(self) -> None:
        try:
            previous, _ = self.document_repository.read()
        except DocumentIOError as e:
            logger.warning(f"Backup skipped, cannot read current notes: {e}")
            return

        try:
            self.backup_repository.snapshot_and_prune(previous)
        except BackupSkipped as e:
            logger.warning(f"Backup skipped: {e}")
