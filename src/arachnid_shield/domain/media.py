# Licensed under the Apache License, Version 2.0
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

DEFAULT_MIME_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class Blob:
    """Binary content that already knows its MIME type."""

    data: bytes
    mime_type: str = ""

    def __len__(self) -> int:
        return len(self.data)


RawBytes = Union[bytes, bytearray, memoryview]
MediaContents = Union[RawBytes, Blob]


def resolve_mime_type(contents: MediaContents, mime_type: Optional[str] = None) -> str:
    """
    Pick the Content-Type for a media upload.

    An explicit `mime_type` wins, then the Blob's own type, then
    application/octet-stream.
    """
    if mime_type:
        return mime_type
    if isinstance(contents, Blob) and contents.mime_type:
        return contents.mime_type
    return DEFAULT_MIME_TYPE


def payload_bytes(contents: MediaContents) -> bytes:
    if isinstance(contents, Blob):
        return bytes(contents.data)
    if isinstance(contents, (bytes, bytearray, memoryview)):
        return bytes(contents)
    raise TypeError(f"Unsupported media contents: {type(contents).__name__}")
