"""Central ORM module — imports all models for Alembic metadata discovery."""

from api.files.orm import FileModel
from api.users.orm import UserModel

__all__ = [
    "FileModel",
    "UserModel",
]
