"""Download service — resolves a storage name and token to an open blob."""

import logging
from typing import BinaryIO

from sqlalchemy.exc import SQLAlchemyError
from starlette.concurrency import run_in_threadpool

from api.files.dto.file import FileRecord
from api.files.repositories import files_repository
from errors import ErrorKind, ShareError
from state import AppState
from tokens import validate_token

logger = logging.getLogger(__name__)


async def open_for_download(
    state: AppState, storage_name: str, token: str | None
) -> tuple[FileRecord, BinaryIO, int]:
    """Return the record, an open handle and the blob size.

    Every failure is reported as NOT_FOUND so callers cannot tell a bad token
    from a missing or expired file.
    """
    if not validate_token(token):
        raise ShareError(ErrorKind.NOT_FOUND)

    try:
        record = await run_in_threadpool(
            files_repository.find_available,
            state.sessions,
            storage_name,
            token,
            files_repository.now_ms(),
        )
    except SQLAlchemyError:
        logger.exception("File lookup failed for %s", storage_name)
        raise ShareError(ErrorKind.NOT_FOUND)
    if record is None:
        raise ShareError(ErrorKind.NOT_FOUND)

    if not await run_in_threadpool(state.blobs.exists, storage_name):
        logger.warning("Blob missing for recorded file %s", storage_name)
        raise ShareError(ErrorKind.NOT_FOUND)
    try:
        handle = await run_in_threadpool(state.blobs.open, storage_name)
    except OSError:
        logger.warning("Could not open blob %s", storage_name)
        raise ShareError(ErrorKind.NOT_FOUND)
    try:
        size = await run_in_threadpool(state.blobs.size, storage_name)
    except OSError:
        handle.close()
        raise ShareError(ErrorKind.NOT_FOUND)
    return record, handle, size
