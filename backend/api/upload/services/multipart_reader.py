"""Incremental reader for the first part of a multipart/form-data body.

The request stream is fed to python-multipart's ``MultipartParser`` one chunk
at a time, so a file part is never held in memory as a whole. Only the first
part is surfaced; anything after it is ignored.
"""

from typing import AsyncIterator

from python_multipart.exceptions import ParseError
from python_multipart.multipart import MultipartParser, parse_options_header
from starlette.requests import ClientDisconnect


class MalformedUpload(Exception):
    """The body is not a usable multipart upload, or it ended too early."""


def boundary_from_content_type(content_type: str | None) -> bytes:
    media_type, params = parse_options_header(content_type or "")
    boundary = params.get(b"boundary")
    if media_type != b"multipart/form-data" or not boundary:
        raise MalformedUpload("not a multipart/form-data body")
    return boundary


class FirstPartReader:

    def __init__(self, chunks: AsyncIterator[bytes], boundary: bytes):
        self._chunks = chunks
        self._parts_seen = 0
        self._header_field = b""
        self._header_value = b""
        self._headers: dict[bytes, bytes] = {}
        self._headers_done = False
        self._part_done = False
        self._pending: list[bytes] = []
        self._parser = MultipartParser(
            boundary,
            callbacks={
                "on_part_begin": self._on_part_begin,
                "on_part_data": self._on_part_data,
                "on_part_end": self._on_part_end,
                "on_header_field": self._on_header_field,
                "on_header_value": self._on_header_value,
                "on_header_end": self._on_header_end,
                "on_headers_finished": self._on_headers_finished,
            },
        )

    def _in_first_part(self) -> bool:
        return self._parts_seen == 1

    def _on_part_begin(self) -> None:
        self._parts_seen += 1

    def _on_part_data(self, data: bytes, start: int, end: int) -> None:
        if self._in_first_part():
            self._pending.append(data[start:end])

    def _on_part_end(self) -> None:
        if self._in_first_part():
            self._part_done = True

    def _on_header_field(self, data: bytes, start: int, end: int) -> None:
        if self._in_first_part():
            self._header_field += data[start:end]

    def _on_header_value(self, data: bytes, start: int, end: int) -> None:
        if self._in_first_part():
            self._header_value += data[start:end]

    def _on_header_end(self) -> None:
        if self._in_first_part():
            self._headers[self._header_field.lower()] = self._header_value
        self._header_field = b""
        self._header_value = b""

    def _on_headers_finished(self) -> None:
        if self._in_first_part():
            self._headers_done = True

    async def _pump(self) -> None:
        """Feed the next request chunk to the parser."""
        try:
            chunk = await self._chunks.__anext__()
        except StopAsyncIteration:
            raise MalformedUpload("body ended before the file part was complete")
        except ClientDisconnect:
            raise MalformedUpload("client disconnected")
        try:
            self._parser.write(chunk)
        except ParseError as e:
            raise MalformedUpload(str(e)) from e

    async def read_headers(self) -> str:
        """Advance to the first part and return its declared filename ("" if none)."""
        while not self._headers_done:
            await self._pump()
        _, params = parse_options_header(self._headers.get(b"content-disposition", b""))
        filename = params.get(b"filename", b"")
        try:
            return filename.decode("utf-8")
        except UnicodeDecodeError:
            raise MalformedUpload("filename is not valid UTF-8")

    async def __aiter__(self) -> AsyncIterator[bytes]:
        while True:
            while self._pending:
                yield self._pending.pop(0)
            if self._part_done:
                return
            await self._pump()
