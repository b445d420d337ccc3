from __future__ import annotations

import copy
import logging
from typing import Any, Callable

from . import intents
from .models import EditState, EmbedState, FieldState, FooterState, ImageState, SendStatus, ThumbnailState
from .payload import build

logger = logging.getLogger(__name__)


def apply(state: EditState, intent: intents.Intent) -> tuple[EditState, intents.SendEffect | None]:
    """
    Apply ``intent`` to ``state``.

    Returns the new state and, for a ``Send`` intent only, the effect asking
    for the built payload to be handed to the transport. The given state is
    left untouched.
    """
    if isinstance(intent, intents.Send):
        return state, intents.SendEffect(url=state.hook_url, payload=build(state))

    handler = _HANDLERS.get(type(intent))
    if handler is None:
        raise TypeError(f"Unsupported intent: {intent!r}")

    new_state = copy.deepcopy(state)
    handler(new_state, intent)
    return new_state, None


def _change_hook_url(state: EditState, intent: intents.ChangeHookUrl) -> None:
    state.hook_url = intent.value


def _change_message(state: EditState, intent: intents.ChangeMessage) -> None:
    state.message = intent.value


def _change_avatar_url(state: EditState, intent: intents.ChangeAvatarUrl) -> None:
    state.avatar_url = intent.value


def _change_username(state: EditState, intent: intents.ChangeUsername) -> None:
    state.username = intent.value


def _set_has_embed(state: EditState, intent: intents.SetHasEmbed) -> None:
    state.has_embed = intent.enabled
    if intent.enabled:
        state.embed = EmbedState()
        return

    # The sub-features have nothing left to act on.
    state.embed = None
    state.has_footer = False
    state.has_image = False
    state.has_thumbnail = False


def _set_advanced_mode(state: EditState, intent: intents.SetAdvancedMode) -> None:
    state.advanced_mode = intent.enabled


def _change_embed_title(state: EditState, intent: intents.ChangeEmbedTitle) -> None:
    if state.embed is not None:
        state.embed.title = intent.value


def _change_embed_description(state: EditState, intent: intents.ChangeEmbedDescription) -> None:
    if state.embed is not None:
        state.embed.description = intent.value


def _add_field(state: EditState, intent: intents.AddField) -> None:
    if state.embed is not None:
        state.embed.fields.append(FieldState(name=intent.name, value=intent.value, inline=intent.inline))


def _remove_field(state: EditState, intent: intents.RemoveField) -> None:
    if state.embed is not None and 0 <= intent.index < len(state.embed.fields):
        del state.embed.fields[intent.index]


def _set_has_footer(state: EditState, intent: intents.SetHasFooter) -> None:
    if state.embed is None:
        return
    was_enabled = state.has_footer
    state.has_footer = intent.enabled
    if not intent.enabled:
        state.embed.footer = None
    elif not was_enabled or state.embed.footer is None:
        state.embed.footer = FooterState()


def _footer_for_edit(state: EditState) -> FooterState | None:
    if state.embed is None or not state.has_footer:
        return None
    if state.embed.footer is None:
        state.embed.footer = FooterState()
    return state.embed.footer


def _change_footer_text(state: EditState, intent: intents.ChangeFooterText) -> None:
    footer = _footer_for_edit(state)
    if footer is not None:
        footer.text = intent.value


def _change_footer_icon(state: EditState, intent: intents.ChangeFooterIcon) -> None:
    footer = _footer_for_edit(state)
    if footer is not None:
        footer.icon_url = intent.value


def _set_has_image(state: EditState, intent: intents.SetHasImage) -> None:
    state.has_image = intent.enabled and state.has_embed


def _change_image_url(state: EditState, intent: intents.ChangeImageUrl) -> None:
    if state.embed is not None:
        state.embed.image = ImageState(url=intent.value)


def _set_has_thumbnail(state: EditState, intent: intents.SetHasThumbnail) -> None:
    state.has_thumbnail = intent.enabled and state.has_embed


def _change_thumbnail_url(state: EditState, intent: intents.ChangeThumbnailUrl) -> None:
    if state.embed is not None:
        state.embed.thumbnail = ThumbnailState(url=intent.value)


def _send_completed(state: EditState, intent: intents.SendCompleted) -> None:
    if intent.ok:
        state.send_status = SendStatus.SUCCEEDED
        state.last_error = None
    else:
        logger.warning("Webhook send failed: %s", intent.error)
        state.send_status = SendStatus.FAILED
        state.last_error = intent.error


_HANDLERS: dict[type, Callable[[EditState, Any], None]] = {
    intents.ChangeHookUrl: _change_hook_url,
    intents.ChangeMessage: _change_message,
    intents.ChangeAvatarUrl: _change_avatar_url,
    intents.ChangeUsername: _change_username,
    intents.SetHasEmbed: _set_has_embed,
    intents.SetAdvancedMode: _set_advanced_mode,
    intents.ChangeEmbedTitle: _change_embed_title,
    intents.ChangeEmbedDescription: _change_embed_description,
    intents.AddField: _add_field,
    intents.RemoveField: _remove_field,
    intents.SetHasFooter: _set_has_footer,
    intents.ChangeFooterText: _change_footer_text,
    intents.ChangeFooterIcon: _change_footer_icon,
    intents.SetHasImage: _set_has_image,
    intents.ChangeImageUrl: _change_image_url,
    intents.SetHasThumbnail: _set_has_thumbnail,
    intents.ChangeThumbnailUrl: _change_thumbnail_url,
    intents.SendCompleted: _send_completed,
}
