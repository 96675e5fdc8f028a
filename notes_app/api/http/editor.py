from fastapi import APIRouter, Depends, Form, Header, HTTPException, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from typing import Optional

from notes_app.api.deps import get_note_service
from notes_app.api.templating import templates
from notes_app.domains.notes.exceptions import (
    BackupNotFoundError, DocumentIOError, InvalidBackupNameError
)
from notes_app.domains.notes.services import NoteService

router = APIRouter(tags=["editor"])

AJAX_MARKER = "XMLHttpRequest"


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def editor_page(
    request: Request,
    note_service: NoteService = Depends(get_note_service)
):
    """Страница редактора с текущим документом и списком копий"""
    try:
        document = note_service.get_document()
    except DocumentIOError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    return templates.TemplateResponse(
        request,
        "editor.html",
        {
            "document": document,
            "backups": note_service.list_backups(),
            "notes_file": note_service.settings.notes_file,
            "backup_dir": note_service.settings.backup_dir,
        },
    )


@router.post("/", include_in_schema=False)
def save_notes(
    content: str = Form(""),
    x_requested_with: Optional[str] = Header(None),
    note_service: NoteService = Depends(get_note_service)
):
    """Сохранение документа: автосохранение или отправка формы"""
    try:
        document = note_service.save_document(content)
    except DocumentIOError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    # Автосохранение получает только время изменения
    if x_requested_with == AJAX_MARKER:
        return PlainTextResponse(document.last_modified_label)

    return RedirectResponse("/", status_code=status.HTTP_302_FOUND)


@router.get("/backup/{name:path}", response_class=HTMLResponse, include_in_schema=False)
def backup_page(
    name: str,
    request: Request,
    note_service: NoteService = Depends(get_note_service)
):
    """Страница просмотра резервной копии"""
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

    return templates.TemplateResponse(request, "backup.html", {"backup": backup})
