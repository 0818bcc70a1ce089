"""Build attachments from files on disk.

The provider rejects single attachments above 15 MiB. :func:`check_attachment_size`
reports against that limit without enforcing it.
"""

from __future__ import annotations

import base64
import logging
import mimetypes
from pathlib import Path
from typing import Final

from mailjet_send.domain.attachment import Attachment

logger = logging.getLogger(__name__)

#: Largest single attachment accepted by the provider, in bytes.
MAX_ATTACHMENT_SIZE_BYTES: Final[int] = 15 * 1024 * 1024

_BYTES_PER_MEGABYTE: Final[int] = 1024 * 1024
_FALLBACK_CONTENT_TYPE: Final[str] = "application/octet-stream"


def file_to_base64(path: Path) -> str:
    """Read a file and return its standard base64 representation.

    Raises:
        FileNotFoundError: The file does not exist.
    """
    return base64.b64encode(path.read_bytes()).decode("ascii")


def attachment_from_file(path: Path, *, content_type: str | None = None, filename: str | None = None) -> Attachment:
    """Read ``path`` into an :class:`Attachment`.

    Args:
        path: File to attach.
        content_type: MIME type; guessed from the extension when omitted.
        filename: Name shown to recipients and used for ``cid:`` references;
            defaults to the file name.

    Raises:
        FileNotFoundError: The file does not exist.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmp:
        ...     note = Path(tmp) / "test.txt"
        ...     _ = note.write_text("This is your attached file!!!\\n")
        ...     attachment = attachment_from_file(note)
        >>> attachment.content_type, attachment.base64_content
        ('text/plain', 'VGhpcyBpcyB5b3VyIGF0dGFjaGVkIGZpbGUhISEK')
    """
    resolved_type = content_type or mimetypes.guess_type(path.name)[0] or _FALLBACK_CONTENT_TYPE
    return Attachment(
        content_type=resolved_type,
        filename=filename or path.name,
        base64_content=file_to_base64(path),
    )


def check_attachment_size(path: Path) -> tuple[bool, float]:
    """Report whether a file exceeds the provider's attachment limit.

    Returns:
        ``(too_large, size_in_mb)``. Unreadable files yield ``(False, 0.0)``
        and never raise.
    """
    try:
        size = path.stat().st_size
    except OSError:
        logger.debug("Unable to stat attachment", extra={"path": str(path)}, exc_info=True)
        return (False, 0.0)
    return (size > MAX_ATTACHMENT_SIZE_BYTES, size / _BYTES_PER_MEGABYTE)


__all__ = [
    "MAX_ATTACHMENT_SIZE_BYTES",
    "attachment_from_file",
    "check_attachment_size",
    "file_to_base64",
]
