from __future__ import annotations

import argparse
import logging
import os
from typing import Sequence

from . import intents
from .client import WebhookClient
from .composer import Composer
from .console import run_console
from .logging_config import setup_logging
from .models import SendStatus
from .view import status_text

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="webhook-composer", description="Compose and send a webhook message")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--url",
        default=os.environ.get("DISCORD_WEBHOOK_URL") or "print",
        help="Webhook URL, or 'print' / 'bypass' (default: $DISCORD_WEBHOOK_URL or print)",
    )
    parser.add_argument("--timeout", type=float, default=30, help="Request timeout in seconds")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("console", help="Interactively send a test message")

    send = subparsers.add_parser("send", help="Compose a message from options and send it")
    send.add_argument("--message", default="", help="Message content")
    send.add_argument("--username", help="Override the webhook username")
    send.add_argument("--avatar-url", help="Override the webhook avatar")
    send.add_argument("--embed-title", help="Attach an embed with this title")
    send.add_argument("--embed-description", help="Attach an embed with this description")
    send.add_argument("--advanced", action="store_true", help="Include fields, image, thumbnail and footer")
    send.add_argument("--footer-text", help="Embed footer text")
    send.add_argument("--footer-icon", help="Embed footer icon URL")
    send.add_argument("--image-url", help="Embed image URL")
    send.add_argument("--thumbnail-url", help="Embed thumbnail URL")
    send.add_argument("--field", action="append", default=[], metavar="NAME=VALUE", help="Embed field (repeatable)")
    send.add_argument("--inline-fields", action="store_true", help="Display embed fields inline")
    return parser


def _parse_field(raw: str) -> tuple[str, str]:
    name, sep, value = raw.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"Field {raw!r} must look like NAME=VALUE")
    return name, value


def intents_from_args(args: argparse.Namespace) -> list[intents.Intent]:
    steps: list[intents.Intent] = [intents.ChangeHookUrl(args.url), intents.ChangeMessage(args.message)]
    if args.username is not None:
        steps.append(intents.ChangeUsername(args.username))
    if args.avatar_url is not None:
        steps.append(intents.ChangeAvatarUrl(args.avatar_url))

    embed_options = (
        args.embed_title,
        args.embed_description,
        args.footer_text,
        args.footer_icon,
        args.image_url,
        args.thumbnail_url,
    )
    if not args.field and all(option is None for option in embed_options):
        return steps

    steps.append(intents.SetHasEmbed(True))
    steps.append(intents.SetAdvancedMode(args.advanced))
    if args.embed_title is not None:
        steps.append(intents.ChangeEmbedTitle(args.embed_title))
    if args.embed_description is not None:
        steps.append(intents.ChangeEmbedDescription(args.embed_description))
    for raw in args.field:
        name, value = _parse_field(raw)
        steps.append(intents.AddField(name, value, inline=args.inline_fields))
    if args.footer_text is not None or args.footer_icon is not None:
        steps.append(intents.SetHasFooter(True))
        if args.footer_text is not None:
            steps.append(intents.ChangeFooterText(args.footer_text))
        if args.footer_icon is not None:
            steps.append(intents.ChangeFooterIcon(args.footer_icon))
    if args.image_url is not None:
        steps.append(intents.SetHasImage(True))
        steps.append(intents.ChangeImageUrl(args.image_url))
    if args.thumbnail_url is not None:
        steps.append(intents.SetHasThumbnail(True))
        steps.append(intents.ChangeThumbnailUrl(args.thumbnail_url))
    return steps


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(debug=args.debug)

    client = WebhookClient(timeout=args.timeout)
    if args.command == "console":
        with client:
            state = run_console(client, args.url)
        return 0 if state.send_status is SendStatus.SUCCEEDED else 1

    try:
        steps = intents_from_args(args)
    except argparse.ArgumentTypeError as exc:
        client.close()
        parser.error(str(exc))

    with Composer(client) as composer:
        for intent in steps:
            composer.dispatch(intent)
        composer.dispatch(intents.Send())
        composer.wait_for_sends()

    state = composer.state
    if state.send_status is SendStatus.FAILED:
        logger.error(status_text(state))
        return 1
    logger.info(status_text(state))
    return 0
