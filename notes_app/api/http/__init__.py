from notes_app.api.http.health import router as health_router
from notes_app.api.http.editor import router as editor_router
from notes_app.api.http.backups import router as backups_router

__all__ = [
    "health_router",
    "editor_router",
    "backups_router"
]
