"""In-memory Mailjet adapters for testing.

Contents:
    * :class:`SendSpy` - Captures send calls and fabricates success responses.
    * :func:`load_mailjet_config_from_dict_in_memory` - Loader without environment lookup.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ...domain import v3, v3_1
from ...domain.enums import StatusCode
from ...domain.errors import ProviderError
from ...domain.payload import Payload
from ...domain.recipient import Recipient
from ..mailjet.config import MailjetConfig
from ..mailjet.schemas import BatchResponse, Response


def _empty_send_list() -> list[dict[str, Any]]:
    return []


def _v3_addresses(message: v3.Message) -> list[Recipient]:
    return [*message.recipients, *(message.to or []), *(message.cc or []), *(message.bcc or [])]


@dataclass
class SendSpy:
    """Captures send operations for test assertions.

    Message IDs are handed out sequentially from ``next_message_id`` so
    tests can predict them.

    Attributes:
        sent: Captured ``send_message`` calls (``config`` and ``payload``).
        should_fail: When True, sends raise a 400 :class:`ProviderError`.
        raise_exception: When set, sends raise this exception after recording.
        next_message_id: ID given to the next fabricated ``Sent`` entry.

    Example:
        >>> spy = SendSpy()
        >>> message = v3.Message("a@b.com", "A", recipients=[Recipient("c@d.com")])
        >>> spy.send_message(config=MailjetConfig(), payload=message).sent[0].email
        'c@d.com'
        >>> len(spy.sent)
        1
    """

    sent: list[dict[str, Any]] = field(default_factory=_empty_send_list)
    should_fail: bool = False
    raise_exception: Exception | None = None
    next_message_id: int = 1

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.sent.clear()
        self.raise_exception = None
        self.should_fail = False

    def _take_id(self) -> int:
        message_id = self.next_message_id
        self.next_message_id += 1
        return message_id

    def _sent_to(self, recipients: list[Recipient]) -> list[dict[str, Any]]:
        return [
            {"Email": recipient.email, "MessageID": self._take_id(), "MessageUUID": str(uuid.uuid4())}
            for recipient in recipients
        ]

    def _fabricate(self, payload: Payload) -> Response | BatchResponse:
        if isinstance(payload, v3_1.Messages):
            return BatchResponse.model_validate(
                {
                    "Messages": [
                        {
                            "Status": "success",
                            "To": self._sent_to(message.to),
                            "Cc": self._sent_to(message.cc),
                            "Bcc": self._sent_to(message.bcc),
                        }
                        for message in payload.messages
                    ]
                }
            )
        addresses = _v3_addresses(payload) if isinstance(payload, v3.Message) else []
        return Response.model_validate({"Sent": self._sent_to(addresses)})

    def send_message(self, *, config: MailjetConfig, payload: Payload) -> Response | BatchResponse:
        """Record the call and fabricate the provider's answer.

        Raises:
            ProviderError: If should_fail is True.
            Exception: If raise_exception is set, raises that exception.
        """
        self.sent.append({"config": config, "payload": payload})
        if self.raise_exception is not None:
            raise self.raise_exception
        if self.should_fail:
            raise ProviderError(
                int(StatusCode.BAD_REQUEST),
                message="Simulated rejection",
                envelope={"StatusCode": 400, "ErrorMessage": "Simulated rejection"},
            )
        return self._fabricate(payload)


def load_mailjet_config_from_dict_in_memory(config_dict: Mapping[str, Any]) -> MailjetConfig:
    """Parse the ``[mailjet]`` section with the real model, ignoring the environment."""
    section = config_dict.get("mailjet", {})
    return MailjetConfig.model_validate(section if section else {})


__all__ = [
    "SendSpy",
    "load_mailjet_config_from_dict_in_memory",
]
