import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from grimoire.config import Settings, settings as default_settings
from grimoire.database import Database
from grimoire.errors import BackendUnavailable
from grimoire.storage import LocalStorage
from grimoire.api.auth import router as auth_router
from grimoire.api.system import router as system_router
from grimoire.api.games import router as games_router
from grimoire.api.characters import router as characters_router
from grimoire.api.stats import attributes_router, skills_router
from grimoire.api.upload import router as upload_router
import grimoire.models  # noqa: F401  registers tables on Base.metadata

logger = logging.getLogger(__name__)

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
        if settings.SECRET_KEY == Settings.model_fields["SECRET_KEY"].default:
            logger.warning("SECRET_KEY is the built-in development value")
        await app.state.database.init_db()
        yield
        await app.state.database.dispose()

    app = FastAPI(title="Grimoire", lifespan=lifespan)
    app.state.settings = settings
    app.state.database = Database(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    app.state.storage = LocalStorage(settings.UPLOAD_DIR, settings.UPLOAD_URL_PREFIX)

    @app.exception_handler(BackendUnavailable)
    async def backend_unavailable(request: Request, exc: BackendUnavailable):
        return JSONResponse(status_code=503, content={"detail": exc.detail, "code": exc.code})

    app.include_router(auth_router)
    app.include_router(system_router)
    app.include_router(games_router)
    app.include_router(characters_router)
    app.include_router(attributes_router)
    app.include_router(skills_router)
    app.include_router(upload_router)
    app.mount(settings.UPLOAD_URL_PREFIX, StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False), name="uploads")
    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("grimoire.main:app", host="0.0.0.0", port=8000, reload=True)
