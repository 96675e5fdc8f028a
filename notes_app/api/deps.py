from fastapi import Depends, Request

from notes_app.config import Settings
from notes_app.domains.notes.services import NoteService


def get_app_settings(request: Request) -> Settings:
    """Настройки, переданные в приложение при создании"""
    return request.app.state.settings


def get_note_service(
    request: Request,
    settings: Settings = Depends(get_app_settings)
) -> NoteService:
    """Функция для dependency injection сервиса заметок"""
    return NoteService(settings, clock=request.app.state.clock)
