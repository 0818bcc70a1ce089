"""Helpers for the ``send`` command: option parsing, payload assembly,
error mapping and result rendering.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, NoReturn

import orjson
import rich_click as click
from pydantic import ValidationError

from mailjet_send import __init__conf__
from mailjet_send.adapters.files import attachment_from_file, check_attachment_size
from mailjet_send.adapters.mailjet.config import MailjetConfig
from mailjet_send.adapters.mailjet.schemas import BatchResponse, Response
from mailjet_send.domain import v3, v3_1
from mailjet_send.domain.attachment import Attachment
from mailjet_send.domain.enums import OutputFormat, SendAPIVersion
from mailjet_send.domain.errors import (
    ConfigurationError,
    DecodeError,
    ProviderError,
    TransportError,
)
from mailjet_send.domain.payload import Payload
from mailjet_send.domain.recipient import Recipient

from ...context import CLIContext
from ...exit_codes import ExitCode

logger = logging.getLogger(__name__)


def parse_recipients(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]) -> list[Recipient]:
    """Click callback turning repeated address options into recipients.

    Each value may hold several comma separated addresses, with or without
    a display name (``'"Jane" <jane@example.com>, joe@example.com'``).

    Raises:
        click.BadParameter: A value contains no address.
    """
    recipients: list[Recipient] = []
    for raw in value:
        parsed = Recipient.from_comma_separated(raw)
        if not parsed:
            raise click.BadParameter(f"No email address found in {raw!r}")
        recipients.extend(parsed)
    return recipients


def parse_vars(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]) -> dict[str, Any] | None:
    """Click callback for ``--var KEY=VALUE``.

    Values that parse as JSON keep their type (``count=3`` is an int);
    anything else is kept as the literal string.

    Raises:
        click.BadParameter: A value has no ``=`` or an empty key.
    """
    if not value:
        return None
    variables: dict[str, Any] = {}
    for item in value:
        key, sep, raw = item.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"Expected KEY=VALUE, got {item!r}")
        try:
            variables[key.strip()] = orjson.loads(raw)
        except orjson.JSONDecodeError:
            variables[key.strip()] = raw
    return variables


def load_mailjet_config(cli_ctx: CLIContext, **overrides: Any) -> MailjetConfig:
    """Build MailjetConfig from the ``[mailjet]`` section plus CLI overrides.

    Overrides that are None are ignored. The merged values are validated
    again so overrides get the same checks as file values.

    Raises:
        SystemExit: The configuration is invalid (CONFIG_ERROR).
    """
    try:
        mailjet_config = cli_ctx.mailjet_config()
        applied = {key: value for key, value in overrides.items() if value is not None}
        if applied:
            mailjet_config = MailjetConfig.model_validate({**mailjet_config.model_dump(), **applied})
    except ValidationError as exc:
        _fail(exc, "Invalid Mailjet configuration", "Invalid Mailjet configuration", ExitCode.CONFIG_ERROR)
    return mailjet_config


def load_attachments(paths: Sequence[str]) -> list[Attachment]:
    """Read attachment files, warning about files above the provider's size limit.

    Raises:
        FileNotFoundError: A file does not exist.
    """
    attachments: list[Attachment] = []
    for raw in paths:
        path = Path(raw)
        too_large, size_mb = check_attachment_size(path)
        if too_large:
            logger.warning("Attachment exceeds provider limit", extra={"path": raw, "size_mb": round(size_mb, 2)})
            click.echo(f"Warning: {raw} is {size_mb:.1f} MB; Mailjet rejects attachments above 15 MB.", err=True)
        attachments.append(attachment_from_file(path))
    return attachments


def build_payload(
    config: MailjetConfig,
    *,
    from_email: str | None,
    from_name: str | None,
    recipients: list[Recipient],
    to: list[Recipient],
    cc: list[Recipient],
    bcc: list[Recipient],
    subject: str | None,
    text: str | None,
    html: str | None,
    attachments: list[Attachment],
    inline_attachments: list[Attachment],
    variables: dict[str, Any] | None,
    sandbox: bool,
) -> Payload:
    """Assemble the message model for ``config.api_version``.

    v3 sends ``--recipient`` addresses through ``Recipients`` (one copy each)
    and ``--to/--cc/--bcc`` as shared headers. v3.1 has no ``Recipients``,
    so every ``--recipient`` becomes a separate message.

    Raises:
        ConfigurationError: No sender address, or v4 selected.
    """
    sender_email = from_email or config.from_email
    sender_name = from_name or config.from_name
    if not sender_email:
        raise ConfigurationError(
            "No sender address (pass --from-email or set mailjet.from_email in the configuration)"
        )

    if config.api_version is SendAPIVersion.V3:
        message = v3.Message(
            from_email=sender_email,
            from_name=sender_name or "",
            subject=subject,
            text_part=text,
            html_part=html,
            vars=variables,
        )
        message.push_many_recipients(recipients)
        if to or cc or bcc:
            message.set_receivers(to, cc=cc or None, bcc=bcc or None)
        for attachment in attachments:
            message.attach(attachment)
        for attachment in inline_attachments:
            message.attach_inline(attachment)
        return message

    if config.api_version is SendAPIVersion.V3_1:
        sender = Recipient(sender_email, sender_name)

        def _message(to_list: list[Recipient], cc_list: list[Recipient], bcc_list: list[Recipient]) -> v3_1.Message:
            return v3_1.Message(
                sender=sender,
                to=to_list,
                cc=cc_list,
                bcc=bcc_list,
                subject=subject,
                text_part=text,
                html_part=html,
                attachments=list(attachments) or None,
                inline_attachments=list(inline_attachments) or None,
                variables=variables,
            )

        batch = v3_1.Messages(sandbox_mode=sandbox)
        batch.extend(_message([recipient], [], []) for recipient in recipients)
        if to or cc or bcc:
            batch.push(_message(to, cc, bcc))
        return batch

    raise ConfigurationError(f"Send API {config.api_version.value} has no email message model")


def execute_with_send_error_handling(operation: Callable[[], Response | BatchResponse]) -> Response | BatchResponse:
    """Run the send and translate failures into exit codes.

    Mapping, most specific first:

    * ConfigurationError -> CONFIG_ERROR (78)
    * ProviderError -> PROVIDER_ERROR (65)
    * TransportError -> UNAVAILABLE (69)
    * DecodeError -> DECODE_ERROR (76)
    * FileNotFoundError -> FILE_NOT_FOUND (2)
    * ValueError -> INVALID_ARGUMENT (22)
    * anything else -> GENERAL_ERROR (1), re-raised when DEVELOPMENT_MODE is set

    Raises:
        SystemExit: On any failure.
    """
    try:
        return operation()
    except ConfigurationError as exc:
        _fail(exc, "Mailjet configuration error", "Configuration error", ExitCode.CONFIG_ERROR)
    except ProviderError as exc:
        logger.error(
            "Mailjet rejected the message",
            extra={"status_code": exc.status_code, "identifier": exc.identifier, "error": exc.message},
        )
        hint = f" (ErrorIdentifier {exc.identifier})" if exc.identifier else ""
        click.echo(f"\nError: {exc}{hint}", err=True)
        raise SystemExit(ExitCode.PROVIDER_ERROR) from exc
    except TransportError as exc:
        _fail(exc, "Mailjet API unreachable", "Mailjet API unreachable", ExitCode.UNAVAILABLE)
    except DecodeError as exc:
        _fail(exc, "Unexpected Mailjet response", "Unexpected response", ExitCode.DECODE_ERROR)
    except FileNotFoundError as exc:
        _fail(exc, "Attachment file not found", "Attachment file not found", ExitCode.FILE_NOT_FOUND)
    except ValueError as exc:
        _fail(exc, "Invalid message parameters", "Invalid message parameters", ExitCode.INVALID_ARGUMENT)
    except Exception as exc:
        if os.environ.get("DEVELOPMENT_MODE"):
            raise
        _fail(exc, "Unexpected error sending message", "Unexpected error", ExitCode.GENERAL_ERROR, log_traceback=True)


def render_response(response: Response | BatchResponse, output_format: OutputFormat) -> None:
    """Print the accepted messages as text or JSON."""
    if output_format is OutputFormat.JSON:
        data = response.model_dump(by_alias=True, exclude_none=True)
        click.echo(orjson.dumps(data, option=orjson.OPT_INDENT_2).decode())
        return

    if isinstance(response, Response):
        click.echo(f"\nAccepted by Mailjet ({len(response.sent)} recipient(s)):")
        for sent in response.sent:
            uuid_part = f"  MessageUUID={sent.message_uuid}" if sent.message_uuid else ""
            click.echo(f"  {sent.email}  MessageID={sent.message_id}{uuid_part}")
        return

    click.echo(f"\nProcessed by Mailjet ({len(response.messages)} message(s)):")
    for index, result in enumerate(response.messages, start=1):
        click.echo(f"  Message {index}: {result.status}")
        for label, entries in (("To", result.to), ("Cc", result.cc), ("Bcc", result.bcc)):
            for entry in entries:
                click.echo(f"    {label:<3} {entry.email}  MessageID={entry.message_id}  MessageUUID={entry.message_uuid}")


def config_hint() -> str:
    return f"See: {__init__conf__.shell_command} config --section mailjet"


def _fail(
    exc: Exception,
    log_message: str,
    user_message: str,
    exit_code: ExitCode,
    *,
    log_traceback: bool = False,
) -> NoReturn:
    """Log, print a one-line error and exit.

    Raises:
        SystemExit: Always, with ``exit_code``.
    """
    logger.error(log_message, extra={"error": str(exc), "error_type": type(exc).__name__}, exc_info=log_traceback)
    click.echo(f"\nError: {user_message} - {exc}", err=True)
    if exit_code is ExitCode.CONFIG_ERROR:
        click.echo(config_hint(), err=True)
    raise SystemExit(exit_code) from exc


__all__ = [
    "build_payload",
    "execute_with_send_error_handling",
    "load_attachments",
    "load_mailjet_config",
    "parse_recipients",
    "parse_vars",
    "render_response",
]
