"""File adapter - attachments read from disk.

Contents:
    * :func:`.attachments.attachment_from_file` - Base64 encode a file into an Attachment
    * :func:`.attachments.check_attachment_size` - Compare a file against the 15 MiB limit
"""

from __future__ import annotations

from .attachments import MAX_ATTACHMENT_SIZE_BYTES, attachment_from_file, check_attachment_size, file_to_base64

__all__ = [
    "MAX_ATTACHMENT_SIZE_BYTES",
    "attachment_from_file",
    "check_attachment_size",
    "file_to_base64",
]
