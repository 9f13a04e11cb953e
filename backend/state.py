"""Process-wide application context, built once at startup."""

from dataclasses import dataclass

from fastapi import Request
from sqlalchemy import Engine
from sqlalchemy.orm import sessionmaker

from config import Settings
from database import make_engine, make_sessionmaker
from storage import BlobStore


@dataclass
class AppState:
    settings: Settings
    engine: Engine
    sessions: sessionmaker
    blobs: BlobStore

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppState":
        engine = make_engine(settings.database_url)
        return cls(
            settings=settings,
            engine=engine,
            sessions=make_sessionmaker(engine),
            blobs=BlobStore(settings.store_dir),
        )

    @property
    def max_upload_bytes(self) -> int:
        return self.settings.max_upload_bytes


def get_app_state(request: Request) -> AppState:
    return request.app.state.share
