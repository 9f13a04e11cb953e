"""Upload controller — handles multipart file uploads."""

from fastapi import APIRouter, Depends, Request

from api.upload.dto.upload import UploadResponse
from api.upload.services import upload_service
from errors import ShareError, to_http_exception
from state import AppState, get_app_state

router = APIRouter(tags=["Upload"])


@router.post("/upload", response_model=UploadResponse)
async def upload_file(
    request: Request,
    token: str | None = None,
    live: str | None = None,
    state: AppState = Depends(get_app_state),
):
    """Upload the first file part of a multipart body."""
    try:
        return await upload_service.save_upload(
            state=state,
            request=request,
            token=token,
            live=live,
        )
    except ShareError as e:
        raise to_http_exception(e)
