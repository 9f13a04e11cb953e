"""Download controller — handles file downloads."""

import mimetypes
from urllib.parse import quote

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from api.download.services import download_service
from errors import ShareError, to_http_exception
from state import AppState, get_app_state
from storage import BlobStore

router = APIRouter(tags=["Download"])


def content_disposition(filename: str) -> str:
    """Attachment header that always carries a plain filename= parameter.

    Non-ASCII names get an ASCII fallback there plus an RFC 5987 filename*.
    """
    fallback = filename.encode("ascii", "replace").decode("ascii")
    fallback = fallback.replace("\\", "\\\\").replace('"', '\\"')
    value = f'attachment; filename="{fallback}"'
    if not filename.isascii():
        value += f"; filename*=utf-8''{quote(filename)}"
    return value


@router.get("/download/{id}")
async def download_file(
    id: str,
    token: str | None = None,
    state: AppState = Depends(get_app_state),
):
    """Stream a file download."""
    try:
        record, handle, size = await download_service.open_for_download(state, id, token)
    except ShareError as e:
        raise to_http_exception(e)

    content_type, _ = mimetypes.guess_type(record.original_name)
    if not content_type:
        content_type = "application/octet-stream"

    return StreamingResponse(
        BlobStore.iter_chunks(handle),
        media_type=content_type,
        headers={
            "Content-Disposition": content_disposition(record.original_name),
            "Content-Length": str(size),
        },
    )
