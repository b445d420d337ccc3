"""Text console fallback: send a fixed test message, optionally customised."""

from __future__ import annotations

import logging
from typing import Callable

from . import intents
from .client import TransportError, WebhookClient
from .models import EditState
from .reducer import apply

logger = logging.getLogger(__name__)

TEST_MESSAGE = "Test message from webhook-composer"
CUSTOMIZE_PROMPT = "Customize Webhook? y/n"


def ask_customize(prompt: Callable[[str], str], echo: Callable[[str], None]) -> bool:
    while True:
        answer = prompt(f"{CUSTOMIZE_PROMPT} ").strip().lower()
        if answer == "y":
            return True
        if answer == "n":
            return False
        echo(f"Invalid answer {answer!r}, please type y or n.")


def run_console(
    client: WebhookClient,
    hook_url: str,
    *,
    prompt: Callable[[str], str] = input,
    echo: Callable[[str], None] = print,
) -> EditState:
    """
    Ask whether to customise the sender, then send the test message once.

    The returned state records whether the send succeeded.
    """
    steps: list[intents.Intent] = [intents.ChangeHookUrl(hook_url), intents.ChangeMessage(TEST_MESSAGE)]
    if ask_customize(prompt, echo):
        steps.append(intents.ChangeAvatarUrl(prompt("Avatar URL: ").strip()))
        steps.append(intents.ChangeUsername(prompt("Username: ").strip()))

    state = EditState()
    for intent in steps:
        state, _ = apply(state, intent)

    _, effect = apply(state, intents.Send())
    try:
        client.send(effect.url, effect.payload)
    except TransportError as exc:
        error = str(exc)
    except Exception as exc:
        logger.exception("Unexpected error while sending webhook")
        error = str(exc) or type(exc).__name__
    else:
        error = None

    state, _ = apply(state, intents.SendCompleted(error=error))
    echo("Message sent." if error is None else f"Sending failed: {error}")
    return state
