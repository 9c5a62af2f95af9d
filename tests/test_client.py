import io
import json
import socket
import urllib.error

import pytest

from core import client as client_module
from core.client import PanosClient
from core.errors import FirewallAPIError
from core.models import RequestDescriptor


class FakeResponse(io.BytesIO):
    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False


@pytest.fixture
def captured(monkeypatch):
    calls = {}

    def fake_urlopen(request, timeout=None, context=None):
        calls["request"] = request
        calls["timeout"] = timeout
        return FakeResponse(calls.get("body", b'{"result": {"@status": "success"}}'))

    monkeypatch.setattr(client_module.urllib.request, "urlopen", fake_urlopen)
    return calls


def test_get_sends_key_and_accept_headers(config, captured):
    payload = PanosClient(config).execute(RequestDescriptor(method="GET", path="/Objects/Addresses"))
    request = captured["request"]
    assert request.full_url == "https://fw.test/restapi/v11.0/Objects/Addresses"
    assert request.get_method() == "GET"
    assert request.get_header("X-pan-key") == "test-key"
    assert request.get_header("Accept") == "application/json"
    assert request.data is None
    assert captured["timeout"] == config.timeout
    assert payload == {"result": {"@status": "success"}}


def test_query_is_url_encoded(config, captured):
    PanosClient(config).execute(
        RequestDescriptor(method="GET", path="/config/xpath", query={"xpath": "/config/devices/entry[@name='a b']"})
    )
    assert captured["request"].full_url == (
        "https://fw.test/restapi/v11.0/config/xpath"
        "?xpath=%2Fconfig%2Fdevices%2Fentry%5B%40name%3D%27a+b%27%5D"
    )


def test_post_sends_json_body(config, captured):
    body = {"config_paths": ["/a"], "new_location": "/b"}
    PanosClient(config).execute(RequestDescriptor(method="POST", path="/Configuration/MultiMove", body=body))
    request = captured["request"]
    assert request.get_method() == "POST"
    assert request.get_header("Content-type") == "application/json"
    assert json.loads(request.data) == body


def test_empty_body_returns_none(config, captured):
    captured["body"] = b""
    assert PanosClient(config).execute(RequestDescriptor(method="GET", path="/Device/VirtualSystems")) is None


def test_non_json_body_raises(config, captured):
    captured["body"] = b"<response status='error'/>"
    with pytest.raises(FirewallAPIError, match="non-JSON"):
        PanosClient(config).execute(RequestDescriptor(method="GET", path="/Device/VirtualSystems"))


@pytest.mark.parametrize("error, status", [
    (urllib.error.HTTPError("https://fw.test", 403, "Forbidden", None, None), 403),
    (urllib.error.URLError("Connection refused"), None),
    (socket.timeout("timed out"), None),
    (ConnectionResetError("reset by peer"), None),
])
def test_failures_become_firewall_api_error(config, monkeypatch, error, status):
    def fake_urlopen(request, timeout=None, context=None):
        raise error

    monkeypatch.setattr(client_module.urllib.request, "urlopen", fake_urlopen)
    with pytest.raises(FirewallAPIError) as exc:
        PanosClient(config).execute(RequestDescriptor(method="GET", path="/Device/VirtualSystems"))
    assert exc.value.status == status
    assert exc.value.__cause__ is error


def test_tls_verification_can_be_disabled():
    from core.config import FirewallConfig

    client = PanosClient(FirewallConfig(api_key="k", verify_tls=False))
    assert client._ssl_context is not None
    assert client._ssl_context.check_hostname is False
