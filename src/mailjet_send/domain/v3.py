"""Send API v3 message model.

A :class:`Message` is a plain mutable record: every field is public and
may be assigned directly, while the ``push_*``/``set_receivers``/``attach*``
methods cover the common mutations without a builder chain.

Two addressing styles exist in v3:

* ``recipients`` - each recipient receives a separate copy and does not
  see the others.
* ``to``/``cc``/``bcc`` - one shared message, every ``To`` and ``Cc``
  recipient is visible to the others.

The caller picks one. If both are populated they are both serialized and
the provider decides; nothing is reconciled here.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar

import orjson

from .attachment import Attachment
from .enums import SendAPIVersion
from .recipient import Recipient, join_comma_separated


def _empty_recipients() -> list[Recipient]:
    return []


def _decode_address_field(value: Any) -> list[Recipient] | None:
    """Accept either the comma separated v3 form or a list of ``{Email, Name}`` objects."""
    if value is None:
        return None
    if isinstance(value, str):
        return Recipient.from_comma_separated(value)
    return [Recipient.from_payload(item) for item in value]


@dataclass(slots=True)
class Message:
    """Payload of one v3 send request.

    Example:
        >>> message = Message("mailjet_sender@company.com", "Mailjet Pilot", "Your email flight plan!")
        >>> message.push_recipient(Recipient("passenger@mailjet.com"))
        >>> payload = message.to_payload()
        >>> payload["FromEmail"], payload["Recipients"]
        ('mailjet_sender@company.com', [{'Email': 'passenger@mailjet.com'}])
        >>> "Attachments" in payload
        False
    """

    api_version: ClassVar[SendAPIVersion] = SendAPIVersion.V3

    from_email: str
    from_name: str
    subject: str | None = None
    text_part: str | None = None
    html_part: str | None = None
    recipients: list[Recipient] = field(default_factory=_empty_recipients)
    to: list[Recipient] | None = None
    cc: list[Recipient] | None = None
    bcc: list[Recipient] | None = None
    attachments: list[Attachment] | None = None
    inline_attachments: list[Attachment] | None = None
    vars: dict[str, Any] | None = None

    def push_recipient(self, recipient: Recipient) -> None:
        """Append one recipient to the unified ``recipients`` list."""
        self.recipients.append(recipient)

    def push_many_recipients(self, recipients: Iterable[Recipient]) -> None:
        """Append several recipients, preserving their order."""
        self.recipients.extend(recipients)

    def set_receivers(
        self,
        to: Iterable[Recipient],
        cc: Iterable[Recipient] | None = None,
        bcc: Iterable[Recipient] | None = None,
    ) -> None:
        """Switch to ``To``/``Cc``/``Bcc`` addressing, replacing all three fields.

        Example:
            >>> message = Message("a@b.com", "A")
            >>> message.set_receivers([Recipient("x@y.com")], cc=[Recipient("z@y.com")])
            >>> message.set_receivers([Recipient("w@y.com")])
            >>> message.to, message.cc
            ([Recipient(email='w@y.com', name=None)], None)
        """
        self.to = list(to)
        self.cc = list(cc) if cc is not None else None
        self.bcc = list(bcc) if bcc is not None else None

    def attach(self, attachment: Attachment) -> None:
        if self.attachments is None:
            self.attachments = []
        self.attachments.append(attachment)

    def attach_inline(self, attachment: Attachment) -> None:
        """Attach a file referenced from ``html_part`` through ``attachment.cid``."""
        if self.inline_attachments is None:
            self.inline_attachments = []
        self.inline_attachments.append(attachment)

    @property
    def uses_mixed_addressing(self) -> bool:
        """True when both ``recipients`` and ``to``/``cc``/``bcc`` carry addresses."""
        return bool(self.recipients) and any((self.to, self.cc, self.bcc))

    def to_payload(self) -> dict[str, Any]:
        """Build the v3 JSON object. Absent fields and empty collections are omitted."""
        payload: dict[str, Any] = {
            "FromEmail": self.from_email,
            "FromName": self.from_name,
        }
        if self.subject is not None:
            payload["Subject"] = self.subject
        if self.text_part is not None:
            payload["Text-part"] = self.text_part
        if self.html_part is not None:
            payload["Html-part"] = self.html_part
        if self.recipients:
            payload["Recipients"] = [recipient.to_payload() for recipient in self.recipients]
        for key, receivers in (("To", self.to), ("Cc", self.cc), ("Bcc", self.bcc)):
            if receivers:
                payload[key] = join_comma_separated(receivers)
        if self.attachments:
            payload["Attachments"] = [attachment.to_payload() for attachment in self.attachments]
        if self.inline_attachments:
            payload["InlineAttachments"] = [attachment.to_payload() for attachment in self.inline_attachments]
        if self.vars:
            payload["Vars"] = self.vars
        return payload

    def to_json(self) -> bytes:
        return orjson.dumps(self.to_payload())

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Message:
        """Rebuild a message from its v3 JSON object.

        Permissive: ``To``/``Cc``/``Bcc`` may be comma separated strings or
        lists of ``{Email, Name}`` objects, and unknown keys are ignored.

        Example:
            >>> message = Message.from_payload({"FromEmail": "a@b.com", "FromName": "A", "To": "<c@d.com>"})
            >>> message.to
            [Recipient(email='c@d.com', name=None)]
        """
        attachments = payload.get("Attachments")
        inline_attachments = payload.get("InlineAttachments")
        return cls(
            from_email=str(payload["FromEmail"]),
            from_name=str(payload.get("FromName", "")),
            subject=payload.get("Subject"),
            text_part=payload.get("Text-part"),
            html_part=payload.get("Html-part"),
            recipients=[Recipient.from_payload(item) for item in payload.get("Recipients") or []],
            to=_decode_address_field(payload.get("To")),
            cc=_decode_address_field(payload.get("Cc")),
            bcc=_decode_address_field(payload.get("Bcc")),
            attachments=[Attachment.from_payload(item) for item in attachments] if attachments else None,
            inline_attachments=(
                [Attachment.from_payload(item) for item in inline_attachments] if inline_attachments else None
            ),
            vars=payload.get("Vars"),
        )


__all__ = ["Message"]
