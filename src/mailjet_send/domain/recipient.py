"""Recipient value type shared between API versions."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from email.utils import getaddresses
from typing import Any


@dataclass(frozen=True, slots=True)
class Recipient:
    """Email recipient: an address and an optional display name.

    The address is not validated locally; the provider rejects malformed
    addresses.

    Example:
        >>> Recipient("passenger@mailjet.com")
        Recipient(email='passenger@mailjet.com', name=None)
        >>> Recipient("rust@rust-lang.org", "The Rust Team").as_comma_separated()
        '"The Rust Team" <rust@rust-lang.org>'
    """

    email: str
    name: str | None = None

    def __post_init__(self) -> None:
        # An empty display name renders and serialises like no name at all
        if self.name == "":
            object.__setattr__(self, "name", None)

    def as_comma_separated(self) -> str:
        """Render the recipient in the ``"Name" <email>`` form used by v3 ``To``/``Cc``/``Bcc``.

        Example:
            >>> Recipient("foo@bar.com").as_comma_separated()
            '<foo@bar.com>'
        """
        if self.name:
            escaped = self.name.replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}" <{self.email}>'
        return f"<{self.email}>"

    @classmethod
    def from_comma_separated(cls, recipients: str) -> list[Recipient]:
        """Parse a comma separated address list, keeping display names when present.

        Example:
            >>> Recipient.from_comma_separated('foo@bar.com, "Bee" <bee@foo.com>')
            [Recipient(email='foo@bar.com', name=None), Recipient(email='bee@foo.com', name='Bee')]
        """
        parsed = getaddresses([recipients])
        return [cls(email=address, name=name or None) for name, address in parsed if address]

    def to_payload(self) -> dict[str, str]:
        """Return the ``{"Email", "Name"}`` object; ``Name`` is omitted when absent."""
        payload = {"Email": self.email}
        if self.name is not None:
            payload["Name"] = self.name
        return payload

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Recipient:
        name = payload.get("Name")
        return cls(email=str(payload["Email"]), name=str(name) if name else None)


def join_comma_separated(recipients: list[Recipient]) -> str:
    """Join recipients into a single v3 address header value.

    Example:
        >>> join_comma_separated([Recipient("a@b.com"), Recipient("c@d.com", "C")])
        '<a@b.com>, "C" <c@d.com>'
    """
    return ", ".join(recipient.as_comma_separated() for recipient in recipients)


__all__ = ["Recipient", "join_comma_separated"]
