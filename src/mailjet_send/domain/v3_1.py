"""Send API v3.1 message model.

In v3.1 every message carries its own sender object, and a request wraps
one or more messages in a ``Messages`` envelope. Recipients listed in
``To`` see each other; create several messages when they must not.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, ClassVar

import orjson

from .attachment import Attachment
from .enums import SendAPIVersion
from .recipient import Recipient


def _empty_recipients() -> list[Recipient]:
    return []


def _attachment_v31(attachment: Attachment) -> dict[str, str]:
    return {
        "ContentType": attachment.content_type,
        "Filename": attachment.filename,
        "Base64Content": attachment.base64_content,
    }


@dataclass(slots=True)
class Message:
    """One v3.1 message.

    Example:
        >>> message = Message(Recipient("pilot@mailjet.com", "Mailjet Pilot"), subject="Hi")
        >>> message.to.append(Recipient("passenger@mailjet.com"))
        >>> message.to_payload()["From"]
        {'Email': 'pilot@mailjet.com', 'Name': 'Mailjet Pilot'}
    """

    sender: Recipient
    to: list[Recipient] = field(default_factory=_empty_recipients)
    cc: list[Recipient] = field(default_factory=_empty_recipients)
    bcc: list[Recipient] = field(default_factory=_empty_recipients)
    subject: str | None = None
    text_part: str | None = None
    html_part: str | None = None
    attachments: list[Attachment] | None = None
    inline_attachments: list[Attachment] | None = None
    variables: dict[str, Any] | None = None

    def attach(self, attachment: Attachment) -> None:
        if self.attachments is None:
            self.attachments = []
        self.attachments.append(attachment)

    def attach_inline(self, attachment: Attachment) -> None:
        """Attach a file referenced as ``cid:<filename>``; the filename doubles as ``ContentID``."""
        if self.inline_attachments is None:
            self.inline_attachments = []
        self.inline_attachments.append(attachment)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"From": self.sender.to_payload()}
        for key, receivers in (("To", self.to), ("Cc", self.cc), ("Bcc", self.bcc)):
            if receivers:
                payload[key] = [recipient.to_payload() for recipient in receivers]
        if self.subject is not None:
            payload["Subject"] = self.subject
        if self.text_part is not None:
            payload["TextPart"] = self.text_part
        if self.html_part is not None:
            payload["HTMLPart"] = self.html_part
        if self.attachments:
            payload["Attachments"] = [_attachment_v31(attachment) for attachment in self.attachments]
        if self.inline_attachments:
            payload["InlinedAttachments"] = [
                {**_attachment_v31(attachment), "ContentID": attachment.filename}
                for attachment in self.inline_attachments
            ]
        if self.variables:
            payload["Variables"] = self.variables
        return payload


@dataclass(slots=True)
class Messages:
    """Root object of a v3.1 send request.

    Example:
        >>> batch = Messages([Message(Recipient("a@b.com"))])
        >>> batch.to_json()
        b'{"Messages":[{"From":{"Email":"a@b.com"}}]}'
    """

    api_version: ClassVar[SendAPIVersion] = SendAPIVersion.V3_1

    messages: list[Message] = field(default_factory=list)
    sandbox_mode: bool = False

    def push(self, message: Message) -> None:
        self.messages.append(message)

    def extend(self, messages: Iterable[Message]) -> None:
        self.messages.extend(messages)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"Messages": [message.to_payload() for message in self.messages]}
        if self.sandbox_mode:
            payload["SandboxMode"] = True
        return payload

    def to_json(self) -> bytes:
        return orjson.dumps(self.to_payload())


__all__ = ["Message", "Messages"]
