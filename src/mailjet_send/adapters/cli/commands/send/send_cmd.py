"""``send`` command: deliver one message through the Mailjet Send API."""

from __future__ import annotations

import logging
from typing import Any

import lib_log_rich.runtime
import rich_click as click

from mailjet_send.adapters.mailjet.schemas import BatchResponse, Response
from mailjet_send.domain.enums import OutputFormat, SendAPIVersion
from mailjet_send.domain.recipient import Recipient

from ...constants import CLICK_CONTEXT_SETTINGS
from ...context import get_cli_context
from ._common import (
    build_payload,
    execute_with_send_error_handling,
    load_attachments,
    load_mailjet_config,
    parse_recipients,
    parse_vars,
    render_response,
)

logger = logging.getLogger(__name__)

_ADDRESS_HELP = "repeatable; accepts 'a@b.com' or '\"Name\" <a@b.com>', comma separated"


@click.command("send", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--from-email", default=None, help="Sender address (default: mailjet.from_email)")
@click.option("--from-name", default=None, help="Sender display name (default: mailjet.from_name)")
@click.option(
    "--recipient",
    "recipients",
    multiple=True,
    callback=parse_recipients,
    help=f"Recipient receiving an individual copy ({_ADDRESS_HELP})",
)
@click.option("--to", "to", multiple=True, callback=parse_recipients, help=f"Visible To recipient ({_ADDRESS_HELP})")
@click.option("--cc", "cc", multiple=True, callback=parse_recipients, help=f"Cc recipient ({_ADDRESS_HELP})")
@click.option("--bcc", "bcc", multiple=True, callback=parse_recipients, help=f"Bcc recipient ({_ADDRESS_HELP})")
@click.option("--subject", default=None, help="Subject line")
@click.option("--text", default=None, help="Plain-text body")
@click.option("--html", default=None, help="HTML body")
@click.option("--attach", "attachments", multiple=True, help="File to attach (repeatable)")
@click.option(
    "--attach-inline",
    "inline_attachments",
    multiple=True,
    help="File referenced from the HTML body as cid:<filename> (repeatable)",
)
@click.option("--var", "variables", multiple=True, callback=parse_vars, help="Template variable KEY=VALUE (repeatable)")
@click.option(
    "--api-version",
    type=click.Choice([v.value for v in (SendAPIVersion.V3, SendAPIVersion.V3_1)]),
    default=None,
    help="Send API version (default: mailjet.api_version)",
)
@click.option("--sandbox", is_flag=True, default=False, help="v3.1 only: validate without delivering")
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format for the provider's answer",
)
@click.pass_context
def cli_send(
    ctx: click.Context,
    from_email: str | None,
    from_name: str | None,
    recipients: list[Recipient],
    to: list[Recipient],
    cc: list[Recipient],
    bcc: list[Recipient],
    subject: str | None,
    text: str | None,
    html: str | None,
    attachments: tuple[str, ...],
    inline_attachments: tuple[str, ...],
    variables: dict[str, Any] | None,
    api_version: str | None,
    sandbox: bool,
    output_format: str,
) -> None:
    r"""Send one message using the configured API keys.

    Keys come from mailjet.public_key/private_key or the MJ_APIKEY_PUBLIC
    and MJ_APIKEY_PRIVATE environment variables.

    \b
    Exit codes: 65 rejected, 69 unreachable, 76 unreadable answer,
    78 configuration, 2 attachment missing.
    """
    if not (recipients or to or cc or bcc):
        raise click.UsageError("At least one of --recipient, --to, --cc or --bcc is required")

    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())
    extra = {"command": "send", "api_version": api_version, "subject": subject}

    with lib_log_rich.runtime.bind(job_id="cli-send", extra=extra):
        mailjet_config = load_mailjet_config(cli_ctx, api_version=api_version)

        def _send() -> Response | BatchResponse:
            payload = build_payload(
                mailjet_config,
                from_email=from_email,
                from_name=from_name,
                recipients=recipients,
                to=to,
                cc=cc,
                bcc=bcc,
                subject=subject,
                text=text,
                html=html,
                attachments=load_attachments(attachments),
                inline_attachments=load_attachments(inline_attachments),
                variables=variables,
                sandbox=sandbox,
            )
            logger.info(
                "Sending message",
                extra={
                    "api_version": mailjet_config.api_version.value,
                    "recipient_count": len(recipients) + len(to) + len(cc) + len(bcc),
                    "attachment_count": len(attachments) + len(inline_attachments),
                },
            )
            return cli_ctx.services.send_message(config=mailjet_config, payload=payload)

        response = execute_with_send_error_handling(_send)
        render_response(response, fmt)


__all__ = ["cli_send"]
