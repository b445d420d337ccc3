import json

import pytest
from pytest_httpx import HTTPXMock

from webhook_composer import TransportError, WebhookClient, build, intents
from webhook_composer.models import EditState
from webhook_composer.reducer import apply


class TestWebhookClient:
    def test_sends_built_payload(self, httpx_mock: HTTPXMock) -> None:
        url = "https://example.com/webhook"
        httpx_mock.add_response(url=url, method="POST", status_code=204)

        state = EditState(hook_url=url, message="hi")
        for intent in (
            intents.SetHasEmbed(True),
            intents.SetAdvancedMode(True),
            intents.ChangeEmbedTitle("T"),
            intents.ChangeThumbnailUrl("http://thumb"),
        ):
            state, _ = apply(state, intent)

        with WebhookClient() as client:
            client.send(state.hook_url, build(state))

        request = httpx_mock.get_request()
        assert request is not None
        body = json.loads(request.content.decode())
        assert body["embeds"][0]["thumbnail"] == {"url": "http://thumb", "height": 32, "width": 32}
        assert body["embeds"][0]["title"] == "T"

    def test_wait_param_is_applied(self, httpx_mock: HTTPXMock) -> None:
        url = "https://example.com/webhook"
        httpx_mock.add_response(url=f"{url}?wait=false", status_code=204)

        with WebhookClient(wait=False) as client:
            client.send(url, build(EditState(message="hi")))

        request = httpx_mock.get_request()
        assert request is not None
        assert request.url.params["wait"] == "false"

    def test_raises_on_http_error(self, httpx_mock: HTTPXMock) -> None:
        url = "https://example.com/webhook"
        httpx_mock.add_response(url=url, status_code=404, json={"message": "Unknown Webhook"})

        with WebhookClient() as client:
            with pytest.raises(TransportError) as excinfo:
                client.send(url, build(EditState(message="bad request")))

        assert excinfo.value.status_code == 404
