"""Discrete actions applied to an :class:`EditState` by the reducer."""

from __future__ import annotations

import dataclasses

from .models import RequestPayload


@dataclasses.dataclass(frozen=True)
class ChangeHookUrl:
    value: str


@dataclasses.dataclass(frozen=True)
class ChangeMessage:
    value: str


@dataclasses.dataclass(frozen=True)
class ChangeAvatarUrl:
    value: str


@dataclasses.dataclass(frozen=True)
class ChangeUsername:
    value: str


@dataclasses.dataclass(frozen=True)
class SetHasEmbed:
    enabled: bool


@dataclasses.dataclass(frozen=True)
class SetAdvancedMode:
    enabled: bool


@dataclasses.dataclass(frozen=True)
class ChangeEmbedTitle:
    value: str


@dataclasses.dataclass(frozen=True)
class ChangeEmbedDescription:
    value: str


@dataclasses.dataclass(frozen=True)
class AddField:
    name: str
    value: str
    inline: bool = False


@dataclasses.dataclass(frozen=True)
class RemoveField:
    index: int


@dataclasses.dataclass(frozen=True)
class SetHasFooter:
    enabled: bool


@dataclasses.dataclass(frozen=True)
class ChangeFooterText:
    value: str


@dataclasses.dataclass(frozen=True)
class ChangeFooterIcon:
    value: str


@dataclasses.dataclass(frozen=True)
class SetHasImage:
    enabled: bool


@dataclasses.dataclass(frozen=True)
class ChangeImageUrl:
    value: str


@dataclasses.dataclass(frozen=True)
class SetHasThumbnail:
    enabled: bool


@dataclasses.dataclass(frozen=True)
class ChangeThumbnailUrl:
    value: str


@dataclasses.dataclass(frozen=True)
class Send:
    pass


@dataclasses.dataclass(frozen=True)
class SendCompleted:
    """Outcome of a send. ``error`` is ``None`` when the webhook accepted it."""

    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclasses.dataclass(frozen=True)
class SendEffect:
    """Request to hand ``payload`` to the transport for ``url``."""

    url: str
    payload: RequestPayload


Intent = (
    ChangeHookUrl
    | ChangeMessage
    | ChangeAvatarUrl
    | ChangeUsername
    | SetHasEmbed
    | SetAdvancedMode
    | ChangeEmbedTitle
    | ChangeEmbedDescription
    | AddField
    | RemoveField
    | SetHasFooter
    | ChangeFooterText
    | ChangeFooterIcon
    | SetHasImage
    | ChangeImageUrl
    | SetHasThumbnail
    | ChangeThumbnailUrl
    | Send
    | SendCompleted
)
