import pytest

pytest.importorskip("google.adk")

from agent.firewall_agent import server_environment


def test_server_environment_forwards_panos_settings_only():
    env = server_environment({
        "PANOS_API_KEY": "k",
        "PANOS_API_BASE_URL": "https://fw",
        "OPENROUTER_API_KEY": "llm-secret",
        "PATH": "/usr/bin",
    })
    assert env == {"PANOS_API_KEY": "k", "PANOS_API_BASE_URL": "https://fw", "PATH": "/usr/bin"}
