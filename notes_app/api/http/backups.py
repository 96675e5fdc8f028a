from fastapi import APIRouter, Depends, HTTPException, status

from notes_app.api.deps import get_note_service
from notes_app.domains.notes.entities import Document
from notes_app.domains.notes.exceptions import (
    BackupNotFoundError, DocumentIOError, InvalidBackupNameError
)
from notes_app.domains.notes.schemas import (
    BackupListResponse, BackupResponse, BackupSummary, DocumentResponse
)
from notes_app.domains.notes.services import NoteService

router = APIRouter(prefix="/api", tags=["backups"])


def _document_response(document: Document) -> DocumentResponse:
    return DocumentResponse(
        content=document.text,
        last_modified=document.last_modified,
        content_length=document.get_content_length(),
        word_count=document.get_word_count()
    )


@router.get("/document", response_model=DocumentResponse)
def get_document(note_service: NoteService = Depends(get_note_service)):
    """Получение текущего документа"""
    try:
        document = note_service.get_document()
    except DocumentIOError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    return _document_response(document)


@router.get("/backups", response_model=BackupListResponse)
def list_backups(note_service: NoteService = Depends(get_note_service)):
    """Получение списка резервных копий"""
    backups = note_service.list_backups()

    return BackupListResponse(
        backups=[BackupSummary.model_validate(backup) for backup in backups],
        total=len(backups)
    )


@router.get("/backups/{name:path}", response_model=BackupResponse)
def get_backup(name: str, note_service: NoteService = Depends(get_note_service)):
    """Получение резервной копии по имени"""
    try:
        backup = note_service.get_backup(name)
    except InvalidBackupNameError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except BackupNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DocumentIOError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    return BackupResponse(
        name=backup.name,
        label=backup.long_label,
        created_at=backup.created_at,
        content=backup.text,
        content_length=len(backup.text)
    )


@router.post("/backups/{name:path}/restore", response_model=DocumentResponse)
def restore_backup(name: str, note_service: NoteService = Depends(get_note_service)):
    """Восстановление документа из резервной копии"""
    try:
        document = note_service.restore_backup(name)
    except InvalidBackupNameError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except BackupNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DocumentIOError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    return _document_response(document)
