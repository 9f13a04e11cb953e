"""Files repository — data access layer."""

from datetime import datetime, timezone

from sqlalchemy import or_
from sqlalchemy.orm import sessionmaker

from api.files.dto.file import FileRecord
from api.files.orm.file_model import FileModel


def now_ms() -> int:
    """Current time in epoch milliseconds, the unit of created_at and dead_at."""
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def _model_to_dto(model: FileModel) -> FileRecord:
    return FileRecord(
        id=model.id,
        original_name=model.original_name,
        token=model.token,
        owner_identifier=model.owner_identifier,
        storage_name=model.storage_name,
        created_at=model.created_at,
        dead_at=model.dead_at,
        available=model.available,
    )


def create(
    sessions: sessionmaker,
    original_name: str,
    token: str,
    owner_identifier: str,
    storage_name: str,
    created_at: int,
    dead_at: int | None = None,
) -> FileRecord:
    with sessions() as session:
        model = FileModel(
            original_name=original_name,
            token=token,
            owner_identifier=owner_identifier,
            storage_name=storage_name,
            created_at=created_at,
            dead_at=dead_at,
        )
        session.add(model)
        session.commit()
        session.refresh(model)
        return _model_to_dto(model)


def find_available(
    sessions: sessionmaker, storage_name: str, token: str, now: int
) -> FileRecord | None:
    """Return the record only if the token matches, it is available and not yet dead."""
    with sessions() as session:
        model = (
            session.query(FileModel)
            .filter(
                FileModel.storage_name == storage_name,
                FileModel.token == token,
                FileModel.available.is_(True),
                or_(FileModel.dead_at.is_(None), FileModel.dead_at > now),
            )
            .first()
        )
        return _model_to_dto(model) if model else None


def storage_name_exists(sessions: sessionmaker, storage_name: str) -> bool:
    with sessions() as session:
        return (
            session.query(FileModel.id).filter_by(storage_name=storage_name).first()
            is not None
        )
