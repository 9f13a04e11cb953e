"""Uploader identity check against the users table."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from starlette.concurrency import run_in_threadpool

from api.users.repositories import users_repository
from errors import ErrorKind, ShareError
from state import AppState
from tokens import is_canonical_uuid

logger = logging.getLogger(__name__)

IDENTITY_HEADER = "user-uuid"


async def authenticate(state: AppState, identifier: str | None) -> str:
    """Return the caller's identifier if it names an enabled user."""
    if identifier is None:
        raise ShareError(ErrorKind.UNAUTHORIZED)
    if not is_canonical_uuid(identifier):
        raise ShareError(ErrorKind.FORBIDDEN)

    try:
        enabled = await run_in_threadpool(
            users_repository.is_enabled, state.sessions, identifier
        )
    except SQLAlchemyError:
        logger.exception("User lookup failed")
        raise ShareError(ErrorKind.INTERNAL_ERROR)

    if not enabled:
        raise ShareError(ErrorKind.FORBIDDEN)
    return identifier
