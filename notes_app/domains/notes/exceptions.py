class NotesError(Exception):
    """Базовая ошибка домена заметок"""


class DocumentIOError(NotesError):
    """Ошибка чтения или записи файла заметок"""


class BackupNotFoundError(NotesError):
    """Резервная копия не найдена"""


class InvalidBackupNameError(NotesError):
    """Недопустимое имя резервной копии"""


class BackupSkipped(NotesError):
    """Резервная копия не создана, сохранение продолжается"""
