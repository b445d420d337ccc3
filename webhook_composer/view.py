"""What an interface should display for a given edit state."""

from __future__ import annotations

import dataclasses

from .models import EditState, EmbedState, FooterState, SendStatus

_DEFAULT_EMBED = EmbedState()
_DEFAULT_FOOTER = FooterState()


@dataclasses.dataclass(frozen=True)
class ViewModel:
    hook_url: str
    message: str
    avatar_url: str
    username: str
    has_embed: bool
    advanced_mode: bool
    has_footer: bool
    has_image: bool
    has_thumbnail: bool
    embed_title: str
    embed_description: str
    footer_text: str
    footer_icon_url: str
    image_url: str
    thumbnail_url: str
    show_embed_section: bool
    show_advanced_toggles: bool
    show_footer_inputs: bool
    show_image_input: bool
    show_thumbnail_input: bool
    status: str


def embed_or_default(state: EditState) -> EmbedState:
    return state.embed or _DEFAULT_EMBED


def footer_or_default(state: EditState) -> FooterState:
    return embed_or_default(state).footer or _DEFAULT_FOOTER


def status_text(state: EditState) -> str:
    if state.send_status is SendStatus.SUCCEEDED:
        return "Sent"
    if state.send_status is SendStatus.FAILED:
        return f"Last send failed: {state.last_error or 'unknown error'}"
    return ""


def derive_view(state: EditState) -> ViewModel:
    embed = embed_or_default(state)
    footer = footer_or_default(state)
    return ViewModel(
        hook_url=state.hook_url,
        message=state.message,
        avatar_url=state.avatar_url or "",
        username=state.username or "",
        has_embed=state.has_embed,
        advanced_mode=state.advanced_mode,
        has_footer=state.has_footer,
        has_image=state.has_image,
        has_thumbnail=state.has_thumbnail,
        embed_title=embed.title,
        embed_description=embed.description,
        footer_text=footer.text or "",
        footer_icon_url=footer.icon_url or "",
        image_url=embed.image.url if embed.image else "",
        thumbnail_url=embed.thumbnail.url if embed.thumbnail else "",
        show_embed_section=state.has_embed,
        show_advanced_toggles=state.advanced_mode,
        show_footer_inputs=state.has_footer,
        show_image_input=state.has_image,
        show_thumbnail_input=state.has_thumbnail,
        status=status_text(state),
    )
