"""Attachment ingestion - turn a file on disk into an Attachment record."""

from __future__ import annotations

import base64
import logging
import mimetypes
from pathlib import Path

from smart_todo.exceptions import AttachmentError, AttachmentTooLargeError
from smart_todo.models import Attachment

logger = logging.getLogger(__name__)

MAX_ATTACHMENT_BYTES = 2 * 1024 * 1024  # 2 MB
DEFAULT_MIME_TYPE = "application/octet-stream"


def guess_mime_type(path: str | Path) -> str:
    mime_type, _ = mimetypes.guess_type(str(path))
    return mime_type or DEFAULT_MIME_TYPE


def read_attachment(
    path: str | Path, max_bytes: int = MAX_ATTACHMENT_BYTES
) -> Attachment:
    """Read a file into a self-contained data-URL attachment.

    Args:
        path: File to attach
        max_bytes: Size limit in bytes

    Returns:
        Attachment with name, MIME type, size and a base64 data URL

    Raises:
        AttachmentTooLargeError: If the file is larger than *max_bytes*
        AttachmentError: If the file cannot be read
    """
    file_path = Path(path).expanduser()
    try:
        size = file_path.stat().st_size
    except OSError as e:
        raise AttachmentError(f"Cannot read attachment '{path}': {e}") from e

    if not file_path.is_file():
        raise AttachmentError(f"Attachment '{path}' is not a regular file")

    if size > max_bytes:
        logger.info("Rejected attachment %s (%d bytes)", file_path.name, size)
        raise AttachmentTooLargeError(file_path.name, size, max_bytes)

    try:
        raw = file_path.read_bytes()
    except OSError as e:
        raise AttachmentError(f"Cannot read attachment '{path}': {e}") from e

    mime_type = guess_mime_type(file_path)
    encoded = base64.b64encode(raw).decode("ascii")
    return Attachment(
        name=file_path.name,
        mime_type=mime_type,
        size=size,
        data=f"data:{mime_type};base64,{encoded}",
    )
