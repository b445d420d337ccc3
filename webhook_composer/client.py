from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from .models import RequestPayload

logger = logging.getLogger(__name__)


class TransportError(RuntimeError):
    """Raised when a webhook request cannot be delivered or is rejected."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class WebhookClient:
    """
    Minimal webhook transport that posts composed payloads once, with
    printing or bypassing supported during development.

    A target URL of ``"print"`` (or an empty URL) logs the payload instead of
    sending it, ``"bypass"`` drops it silently.
    """

    def __init__(
        self,
        *,
        wait: bool | None = None,
        timeout: float = 30,
        session: httpx.Client | None = None,
    ):
        self.wait = wait
        self.timeout = timeout
        self._session = session or httpx.Client()
        self._owns_session = session is None

    def __enter__(self) -> "WebhookClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def send(self, url: str, payload: RequestPayload) -> httpx.Response | None:
        body = payload.to_dict()
        url = url or "print"

        if url == "print":
            logger.info(body)
            return None

        if url == "bypass":
            return None

        return self._post(url, body)

    def _post(self, url: str, body: dict[str, Any]) -> httpx.Response:
        params = {"wait": str(self.wait).lower()} if self.wait is not None else None
        try:
            response = self._session.post(url, json=body, params=params, timeout=self.timeout)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"Could not reach webhook: {exc}") from exc
        logger.debug(response.content)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"Webhook rejected the message with status {response.status_code}",
                status_code=response.status_code,
            ) from exc
        return response
