from datetime import datetime
from typing import Callable, Optional
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from notes_app.api.http import backups_router, editor_router, health_router
from notes_app.api.templating import STATIC_DIR
from notes_app.config import Settings, get_settings

logger = logging.getLogger(__name__)


class NoCacheStaticFiles(StaticFiles):
    async def get_response(self, path: str, scope):
        response = await super().get_response(path, scope)
        if response:
            response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
            response.headers["Pragma"] = "no-cache"
            response.headers["Expires"] = "0"
        return response


def create_app(
    settings: Optional[Settings] = None,
    clock: Optional[Callable[[], datetime]] = None
) -> FastAPI:
    """Создание приложения с переданными настройками"""
    app = FastAPI(
        title="Notes",
        description="Локальный редактор заметок с автосохранением и резервными копиями",
        version="1.0.0"
    )

    app.state.settings = settings or get_settings()
    app.state.clock = clock

    # Статика без кэширования
    app.mount("/static", NoCacheStaticFiles(directory=str(STATIC_DIR)), name="static")

    app.include_router(health_router)
    app.include_router(backups_router)
    app.include_router(editor_router)

    return app


app = create_app()


def run() -> None:
    """Точка входа notes-app"""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # Настройки уже прочитаны при создании модульного app
    settings = app.state.settings
    logging.getLogger().setLevel(settings.notes_log_level.upper())

    logger.info(f"Using notes file: {settings.notes_file}")
    logger.info(f"Using backup directory: {settings.backup_dir}")
    logger.info(f"Starting server on port: {settings.notes_port}")

    uvicorn.run(app, host=settings.notes_host, port=settings.notes_port)


if __name__ == "__main__":
    run()
