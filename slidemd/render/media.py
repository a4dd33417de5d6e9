"""Inline media embedding as base64 data URIs."""

from __future__ import annotations

import base64
import re
from dataclasses import dataclass
from pathlib import Path

from ..errors import MediaNotFoundError

MIME_TYPES = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "svg": "image/svg+xml",
    "webp": "image/webp",
    "mp4": "video/mp4",
    "webm": "video/webm",
    "ogg": "video/ogg",
}
DEFAULT_MIME_TYPE = "application/octet-stream"

_IMAGE_MARKUP_RE = re.compile(r"!\[.*\]\((.*?)\)")
_EXTENSION_RE = re.compile(r"\.([a-zA-Z0-9]+)$")


@dataclass(frozen=True)
class EmbeddedMedia:
    mime_type: str
    data: str

    @property
    def data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


def guess_mime_type(path: str) -> str:
    match = _EXTENSION_RE.search(path)
    if not match:
        return DEFAULT_MIME_TYPE
    return MIME_TYPES.get(match.group(1).lower(), DEFAULT_MIME_TYPE)


def extract_image_path(block: str) -> str:
    """Return the path of a ``![alt](path)`` reference, or the block itself."""
    match = _IMAGE_MARKUP_RE.search(block)
    if match:
        return match.group(1)
    return block.strip()


def embed_file(base_dir: Path, relative_path: str) -> EmbeddedMedia:
    """Read a media file relative to base_dir and base64-encode it."""
    path = Path(base_dir) / relative_path
    if not path.is_file():
        raise MediaNotFoundError(
            f"Media file not found: {relative_path}",
            {"path": relative_path, "resolved": str(path)},
        )
    data = base64.b64encode(path.read_bytes()).decode("ascii")
    return EmbeddedMedia(mime_type=guess_mime_type(relative_path), data=data)
