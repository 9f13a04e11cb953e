"""File Data Transfer Objects."""

from pydantic import BaseModel


class FileRecord(BaseModel):
    id: int
    original_name: str
    token: str
    owner_identifier: str
    storage_name: str
    created_at: int
    dead_at: int | None = None
    available: bool = True
