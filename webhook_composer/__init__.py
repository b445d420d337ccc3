from .client import TransportError, WebhookClient
from .composer import Composer
from .models import (
    EditState,
    EmbedPayload,
    EmbedState,
    FieldState,
    FooterState,
    ImageState,
    RequestPayload,
    SendStatus,
    ThumbnailState,
)
from .payload import build
from .reducer import apply
from .view import ViewModel, derive_view

__all__ = [
    "Composer",
    "EditState",
    "EmbedPayload",
    "EmbedState",
    "FieldState",
    "FooterState",
    "ImageState",
    "RequestPayload",
    "SendStatus",
    "ThumbnailState",
    "TransportError",
    "ViewModel",
    "WebhookClient",
    "apply",
    "build",
    "derive_view",
]
