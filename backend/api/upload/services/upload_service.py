"""Upload service — accepts one file from an enabled user."""

import logging
from datetime import timedelta

from fastapi import Request
from starlette.concurrency import run_in_threadpool

from auth import authenticate
from api.files.repositories import files_repository
from api.upload.dto.upload import UploadResponse
from api.upload.services.multipart_reader import (
    FirstPartReader,
    MalformedUpload,
    boundary_from_content_type,
)
from errors import ErrorKind, ShareError
from state import AppState
from tokens import derive_storage_name, resolve_token

logger = logging.getLogger(__name__)

MAX_FILENAME_BYTES = 255
MAX_LIVE_MS = int(timedelta(days=365 * 10).total_seconds() * 1000)


class UploadTooLarge(Exception):
    pass


def check_content_length(header: str | None, limit: int) -> None:
    """Reject a declared body size over ``limit``. A missing or blank header passes."""
    if header is None or not header.strip():
        return
    try:
        declared = int(header.strip())
    except ValueError:
        raise ShareError(ErrorKind.BAD_REQUEST)
    if declared > limit:
        raise ShareError(ErrorKind.PAYLOAD_TOO_LARGE)


def compute_dead_at(now: int, live: str | int | None) -> int | None:
    """Expiry timestamp for a lifetime in ms, or None when it should never expire."""
    if live is None:
        return None
    try:
        live_ms = int(live)
    except (TypeError, ValueError):
        return None
    if 0 < live_ms < MAX_LIVE_MS:
        return now + live_ms
    return None


def is_valid_filename(filename: str) -> bool:
    return 0 < len(filename.encode("utf-8")) <= MAX_FILENAME_BYTES


async def _stream_to_blob(state: AppState, reader: FirstPartReader, storage_name: str) -> int:
    """Write the part into a freshly created blob and return its size."""
    try:
        handle = await run_in_threadpool(state.blobs.create, storage_name)
    except OSError:
        logger.exception("Could not create blob %s", storage_name)
        raise ShareError(ErrorKind.INTERNAL_ERROR)

    size = 0
    try:
        with handle:
            async for chunk in reader:
                size += len(chunk)
                if size > state.max_upload_bytes:
                    raise UploadTooLarge()
                await run_in_threadpool(handle.write, chunk)
    except UploadTooLarge:
        await run_in_threadpool(state.blobs.remove, storage_name)
        logger.warning("Upload %s exceeded %d bytes", storage_name, state.max_upload_bytes)
        raise ShareError(ErrorKind.PAYLOAD_TOO_LARGE)
    except (MalformedUpload, OSError) as e:
        await run_in_threadpool(state.blobs.remove, storage_name)
        logger.warning("Upload %s aborted: %s", storage_name, e)
        raise ShareError(ErrorKind.BAD_REQUEST)
    except BaseException:
        # cancelled mid-stream; removed inline since further awaits may be cancelled too
        state.blobs.remove(storage_name)
        raise
    return size


async def save_upload(
    state: AppState,
    request: Request,
    token: str | None = None,
    live: str | None = None,
) -> UploadResponse:
    """Authenticate, stream the first multipart part to disk, then record it."""
    owner = await authenticate(state, request.headers.get("user-uuid"))
    check_content_length(request.headers.get("content-length"), state.max_upload_bytes)

    token = resolve_token(token)
    created_at = files_repository.now_ms()
    dead_at = compute_dead_at(created_at, live)

    try:
        boundary = boundary_from_content_type(request.headers.get("content-type"))
        reader = FirstPartReader(request.stream(), boundary)
        filename = await reader.read_headers()
    except MalformedUpload as e:
        logger.warning("Rejected upload from %s: %s", owner, e)
        raise ShareError(ErrorKind.BAD_REQUEST)
    if not is_valid_filename(filename):
        raise ShareError(ErrorKind.BAD_REQUEST)

    storage_name = derive_storage_name(filename)
    size = await _stream_to_blob(state, reader, storage_name)

    try:
        await run_in_threadpool(
            files_repository.create,
            state.sessions,
            original_name=filename,
            token=token,
            owner_identifier=owner,
            storage_name=storage_name,
            created_at=created_at,
            dead_at=dead_at,
        )
    except Exception:
        logger.exception("Failed to record upload %s", storage_name)
        await run_in_threadpool(state.blobs.remove, storage_name)
        raise ShareError(ErrorKind.INTERNAL_ERROR)

    logger.info("Stored %s (%d bytes) for %s", storage_name, size, owner)
    return UploadResponse(token=token, id=storage_name)
