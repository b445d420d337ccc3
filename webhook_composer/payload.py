from __future__ import annotations

from .models import (
    EditState,
    EmbedPayload,
    EmbedState,
    FieldPayload,
    FooterPayload,
    ImagePayload,
    RequestPayload,
)


def build(state: EditState) -> RequestPayload:
    """
    Turn the current edit state into the body posted to the webhook.

    Never fails: missing overrides become empty strings and a missing embed
    is replaced by a default one. Outside advanced mode only the embed title
    and description are sent, whatever else the embed holds.
    """
    payload = RequestPayload(
        content=state.message,
        avatar_url=state.avatar_url or "",
        username=state.username or "",
    )
    if state.has_embed:
        payload.embeds.append(_build_embed(state.embed or EmbedState(), state.advanced_mode))
    return payload


def _build_embed(embed: EmbedState, advanced_mode: bool) -> EmbedPayload:
    result = EmbedPayload(title=embed.title, description=embed.description)
    if not advanced_mode:
        return result

    result.fields = [FieldPayload(name=f.name, value=f.value, inline=f.inline) for f in embed.fields]
    if embed.image is not None:
        result.image = ImagePayload(url=embed.image.url)
    if embed.thumbnail is not None:
        result.thumbnail = ImagePayload(url=embed.thumbnail.url)
    if embed.footer is not None:
        result.footer = FooterPayload(text=embed.footer.text, icon_url=embed.footer.icon_url)
    return result
