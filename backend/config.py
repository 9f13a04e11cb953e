"""Application configuration."""

import os
from pathlib import Path

from pydantic import BaseModel, Field

ENV_PREFIX = "SHARE_"


class Settings(BaseModel):
    database_url: str = "sqlite:///./db.sqlite"
    bind: str = "127.0.0.1:8080"
    store_dir: Path = Path("./store")
    max_file_size_mb: int = Field(default=10, gt=0)

    @property
    def max_upload_bytes(self) -> int:
        return self.max_file_size_mb * (1 << 20)

    @property
    def host(self) -> str:
        return self.bind.rsplit(":", 1)[0]

    @property
    def port(self) -> int:
        host, _, port = self.bind.rpartition(":")
        return int(port) if host else 8080


def database_url_for(path: str) -> str:
    """Turn a ``--db`` value into a SQLAlchemy URL. Plain paths are SQLite files."""
    if "://" in path:
        return path
    return f"sqlite:///{path}"


def load_settings(**overrides) -> Settings:
    """Build settings from SHARE_* environment variables plus explicit overrides."""
    data = {}
    if os.environ.get(f"{ENV_PREFIX}DB"):
        data["database_url"] = database_url_for(os.environ[f"{ENV_PREFIX}DB"])
    if os.environ.get(f"{ENV_PREFIX}BIND"):
        data["bind"] = os.environ[f"{ENV_PREFIX}BIND"].strip()
    if os.environ.get(f"{ENV_PREFIX}STORE"):
        data["store_dir"] = os.environ[f"{ENV_PREFIX}STORE"].strip()
    if os.environ.get(f"{ENV_PREFIX}MAX_FILE_SIZE"):
        data["max_file_size_mb"] = os.environ[f"{ENV_PREFIX}MAX_FILE_SIZE"].strip()

    data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
