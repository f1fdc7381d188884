import asyncio
import json

import pytest
import requests

from leadforms.config import WebhookConfig
from leadforms.webhook_client import WebhookClient, WebhookError


class FakeResponse:
    def __init__(self, status_code=200):
        self.status_code = status_code

    @property
    def ok(self):
        return self.status_code < 400


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse()
        self.error = error
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


def test_post_json_sends_json_body():
    session = FakeSession()
    client = WebhookClient("https://hooks.example.com/lead", session=session)

    client.post_json({"firstName": "Jane", "employeeCount": 3})

    url, kwargs = session.calls[0]
    assert url == "https://hooks.example.com/lead"
    assert kwargs["headers"] == {"Content-Type": "application/json"}
    assert json.loads(kwargs["data"]) == {"firstName": "Jane", "employeeCount": 3}
    assert kwargs["timeout"] is None


def test_post_json_wraps_transport_errors():
    session = FakeSession(error=requests.ConnectionError("refused"))
    client = WebhookClient("https://hooks.example.com/lead", session=session)

    with pytest.raises(WebhookError):
        client.post_json({})


def test_non_2xx_response_is_not_an_error(caplog):
    session = FakeSession(response=FakeResponse(status_code=500))
    client = WebhookClient("https://hooks.example.com/lead", session=session)

    with caplog.at_level("WARNING"):
        response = client.post_json({})

    assert response.status_code == 500
    assert "webhook.status" in caplog.text


def test_send_is_awaitable():
    session = FakeSession()
    client = WebhookClient("https://hooks.example.com/lead", session=session)

    response = asyncio.run(client.send({"role": "Founder"}))

    assert response.ok
    assert len(session.calls) == 1


def test_from_config_uses_endpoint_and_timeout():
    client = WebhookClient.from_config(
        WebhookConfig(endpoint="https://hooks.example.com/x", timeout=5.0),
        session=FakeSession(),
    )
    assert client.endpoint == "https://hooks.example.com/x"
    assert client.timeout == 5.0
