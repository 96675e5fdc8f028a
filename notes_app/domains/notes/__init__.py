from notes_app.domains.notes.entities import Document, BackupEntry
from notes_app.domains.notes.exceptions import (
    NotesError, DocumentIOError, BackupNotFoundError,
    InvalidBackupNameError, BackupSkipped
)
from notes_app.domains.notes.schemas import (
    DocumentResponse, BackupSummary, BackupListResponse, BackupResponse
)

__all__ = [
    "Document", "BackupEntry",
    "NotesError", "DocumentIOError", "BackupNotFoundError",
    "InvalidBackupNameError", "BackupSkipped",
    "DocumentResponse", "BackupSummary", "BackupListResponse", "BackupResponse"
]
