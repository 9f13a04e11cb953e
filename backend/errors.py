"""Error kinds raised by the upload/download services and their HTTP mapping."""

from enum import Enum

from fastapi import HTTPException


class ErrorKind(Enum):
    UNAUTHORIZED = (401, "Unauthorized")
    FORBIDDEN = (403, "Forbidden")
    BAD_REQUEST = (400, "Bad Request")
    PAYLOAD_TOO_LARGE = (413, "File too large")
    NOT_FOUND = (404, "Not Found")
    INTERNAL_ERROR = (500, "Internal Server Error")

    @property
    def status_code(self) -> int:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


class ShareError(Exception):
    """A failure that ends a request with one of the fixed ``ErrorKind`` responses."""

    def __init__(self, kind: ErrorKind):
        super().__init__(kind.message)
        self.kind = kind


def to_http_exception(error: ShareError) -> HTTPException:
    return HTTPException(status_code=error.kind.status_code, detail=error.kind.message)
