import json
import logging

import httpx
import pytest

from webhook_composer import EmbedPayload, RequestPayload, TransportError, WebhookClient


def test_print_mode_logs_payload(caplog):
    client = WebhookClient()

    with caplog.at_level(logging.INFO):
        client.send("print", RequestPayload(content="hello world"))

    assert "hello world" in caplog.text


def test_empty_url_falls_back_to_print(caplog):
    class _FailingSession:
        def post(self, *args, **kwargs):
            raise AssertionError("post should not be called without a URL")

    client = WebhookClient(session=_FailingSession())

    with caplog.at_level(logging.INFO):
        assert client.send("", RequestPayload(content="nowhere")) is None

    assert "nowhere" in caplog.text


def test_bypass_mode_skips_network():
    class _FailingSession:
        def post(self, *args, **kwargs):
            raise AssertionError("post should not be called in bypass mode")

    client = WebhookClient(session=_FailingSession())
    client.send("bypass", RequestPayload(content="ignored"))


def test_posts_json_body_once():
    url = "https://example.com/webhook"
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(204)

    client = WebhookClient(session=httpx.Client(transport=httpx.MockTransport(handler)))
    payload = RequestPayload(content="hi", embeds=[EmbedPayload(title="T", description="D")])
    client.send(url, payload)

    assert len(requests) == 1
    request = requests[0]
    assert request.method == "POST"
    assert request.headers["content-type"] == "application/json"
    assert "wait" not in request.url.params
    assert json.loads(request.content.decode()) == {
        "content": "hi",
        "avatar_url": "",
        "username": "",
        "embeds": [{"title": "T", "type": "rich", "description": "D"}],
    }


def test_wait_param_is_applied_when_configured():
    last_request: dict[str, httpx.Request] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        last_request["request"] = request
        return httpx.Response(200, json={})

    client = WebhookClient(wait=True, session=httpx.Client(transport=httpx.MockTransport(handler)))
    client.send("https://example.com/webhook", RequestPayload(content="hi"))

    assert last_request["request"].url.params["wait"] == "true"


def test_does_not_retry_on_rate_limit():
    attempts = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal attempts
        attempts += 1
        return httpx.Response(429, json={"retry_after": 0})

    client = WebhookClient(session=httpx.Client(transport=httpx.MockTransport(handler)))
    with pytest.raises(TransportError) as excinfo:
        client.send("https://example.com/webhook", RequestPayload(content="once"))

    assert attempts == 1
    assert excinfo.value.status_code == 429


def test_raises_on_http_error():
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"message": "bad"})

    client = WebhookClient(session=httpx.Client(transport=httpx.MockTransport(handler)))
    with pytest.raises(TransportError):
        client.send("https://example.com/webhook", RequestPayload(content="bad request"))


def test_raises_on_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = WebhookClient(session=httpx.Client(transport=httpx.MockTransport(handler)))
    with pytest.raises(TransportError) as excinfo:
        client.send("https://example.com/webhook", RequestPayload(content="unreachable"))

    assert excinfo.value.status_code is None
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


def test_raises_on_url_without_scheme():
    with WebhookClient() as client, pytest.raises(TransportError):
        client.send("example.com/webhook", RequestPayload(content="lost"))


def test_owned_session_is_closed():
    with WebhookClient() as client:
        session = client._session
    assert session.is_closed


def test_injected_session_is_left_open():
    session = httpx.Client(transport=httpx.MockTransport(lambda _: httpx.Response(204)))
    with WebhookClient(session=session):
        pass
    assert not session.is_closed
    session.close()
