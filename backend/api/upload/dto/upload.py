"""Upload Data Transfer Objects."""

from pydantic import BaseModel


class UploadResponse(BaseModel):
    token: str
    id: str
