"""
Dataclass representations of the composer edit state and of the webhook
payload it produces.

Reference:
https://discord.com/developers/docs/resources/webhook#execute-webhook-jsonform-params
"""

from __future__ import annotations

import dataclasses
import enum
from typing import Any

# Image and thumbnail previews are always shown at this size.
IMAGE_SIZE = 32


class SendStatus(enum.Enum):
    IDLE = "idle"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclasses.dataclass
class FieldState:
    """Represents a single field in an embed."""

    name: str = ""
    value: str = ""
    inline: bool = False


@dataclasses.dataclass
class FooterState:
    text: str | None = None
    icon_url: str | None = None


@dataclasses.dataclass
class ImageState:
    url: str = ""
    height: int = dataclasses.field(default=IMAGE_SIZE, init=False)
    width: int = dataclasses.field(default=IMAGE_SIZE, init=False)


@dataclasses.dataclass
class ThumbnailState:
    url: str = ""
    height: int = dataclasses.field(default=IMAGE_SIZE, init=False)
    width: int = dataclasses.field(default=IMAGE_SIZE, init=False)


@dataclasses.dataclass
class EmbedState:
    """Editable embed attachment, only present while the embed is enabled."""

    title: str = ""
    description: str = ""
    fields: list[FieldState] = dataclasses.field(default_factory=list)
    image: ImageState | None = None
    thumbnail: ThumbnailState | None = None
    footer: FooterState | None = None


@dataclasses.dataclass
class EditState:
    """Everything the composer form holds between sends."""

    hook_url: str = ""
    message: str = ""
    avatar_url: str | None = None
    username: str | None = None
    has_embed: bool = False
    embed: EmbedState | None = None
    advanced_mode: bool = False
    has_footer: bool = False
    has_image: bool = False
    has_thumbnail: bool = False
    send_status: SendStatus = SendStatus.IDLE
    last_error: str | None = None


@dataclasses.dataclass
class FieldPayload:
    name: str
    value: str
    inline: bool = False


@dataclasses.dataclass
class FooterPayload:
    text: str | None = None
    icon_url: str | None = None


@dataclasses.dataclass
class ImagePayload:
    url: str
    height: int = dataclasses.field(default=IMAGE_SIZE, init=False)
    width: int = dataclasses.field(default=IMAGE_SIZE, init=False)


@dataclasses.dataclass
class EmbedPayload:
    """Represents an embed object on the wire.

    Members left as ``None`` are omitted from the serialized payload.
    """

    title: str = ""
    type: str = "rich"
    description: str = ""
    fields: list[FieldPayload] | None = None
    image: ImagePayload | None = None
    thumbnail: ImagePayload | None = None
    footer: FooterPayload | None = None


@dataclasses.dataclass
class RequestPayload:
    """Top-level webhook payload."""

    content: str = ""
    avatar_url: str = ""
    username: str = ""
    embeds: list[EmbedPayload] = dataclasses.field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self, dict_factory=_drop_absent)


def _drop_absent(items: list[tuple[str, Any]]) -> dict[str, Any]:
    return {key: value for key, value in items if value is not None}


__all__ = [
    "IMAGE_SIZE",
    "EditState",
    "EmbedPayload",
    "EmbedState",
    "FieldPayload",
    "FieldState",
    "FooterPayload",
    "FooterState",
    "ImagePayload",
    "ImageState",
    "RequestPayload",
    "SendStatus",
    "ThumbnailState",
]
