"""simplefileshare — application factory."""

from fastapi import FastAPI

from api.download.controllers.download_controller import router as download_router
from api.upload.controllers.upload_controller import router as upload_router
from config import Settings, load_settings
from database import prepare_schema
from state import AppState


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    state = AppState.from_settings(settings)
    prepare_schema(state.engine)

    app = FastAPI(title="simplefileshare", version="0.1.0")
    app.state.share = state

    @app.get("/api/health")
    async def health():
        return {"status": "ok"}

    app.include_router(upload_router)
    app.include_router(download_router)
    return app
