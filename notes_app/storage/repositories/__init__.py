from notes_app.storage.repositories.document_repository import DocumentRepository
from notes_app.storage.repositories.backup_repository import BackupRepository, BACKUP_RETENTION

__all__ = [
    "DocumentRepository",
    "BackupRepository",
    "BACKUP_RETENTION"
]
