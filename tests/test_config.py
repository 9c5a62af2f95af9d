import pytest

from core.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS, load_config
from core.errors import ConfigError


def test_api_key_required():
    with pytest.raises(ConfigError, match="PANOS_API_KEY"):
        load_config({})
    with pytest.raises(ConfigError):
        load_config({"PANOS_API_KEY": "   "})


def test_defaults():
    config = load_config({"PANOS_API_KEY": "abc"})
    assert config.api_key == "abc"
    assert config.base_url == DEFAULT_BASE_URL
    assert config.timeout == DEFAULT_TIMEOUT_SECONDS
    assert config.verify_tls is True


def test_overrides():
    config = load_config({
        "PANOS_API_KEY": "abc",
        "PANOS_API_BASE_URL": "https://10.0.0.1/restapi/v10.2/",
        "PANOS_API_TIMEOUT": "5",
        "PANOS_VERIFY_TLS": "false",
    })
    assert config.base_url == "https://10.0.0.1/restapi/v10.2"
    assert config.timeout == 5.0
    assert config.verify_tls is False


@pytest.mark.parametrize("env", [
    {"PANOS_API_TIMEOUT": "soon"},
    {"PANOS_API_TIMEOUT": "0"},
    {"PANOS_VERIFY_TLS": "maybe"},
])
def test_malformed_optional_values(env):
    with pytest.raises(ConfigError):
        load_config({"PANOS_API_KEY": "abc", **env})


def test_repr_hides_api_key():
    assert "super-secret" not in repr(load_config({"PANOS_API_KEY": "super-secret"}))


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("PANOS_API_KEY", "from-env")
    monkeypatch.delenv("PANOS_API_BASE_URL", raising=False)
    assert load_config().api_key == "from-env"
