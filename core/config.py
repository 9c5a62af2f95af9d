# =============================================================================
# core/config.py  —  Startup configuration for the firewall connection
# =============================================================================
#
# Read ONCE at process start and passed into the Dispatcher explicitly, so
# nothing in core/ reads os.environ behind your back (and tests can build a
# FirewallConfig by hand).
#
# ENVIRONMENT VARIABLES:
#   PANOS_API_KEY        required: the X-PAN-KEY sent with every request
#   PANOS_API_BASE_URL   optional: REST API root of the firewall
#   PANOS_API_TIMEOUT    optional: seconds per request (default 30)
#   PANOS_VERIFY_TLS     optional: "false" to accept self-signed certs
#
# The entry points call python-dotenv's load_dotenv() before load_config(),
# so a .env file in the working directory works too.
# =============================================================================

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from core.errors import ConfigError


API_KEY_ENV = "PANOS_API_KEY"
BASE_URL_ENV = "PANOS_API_BASE_URL"
TIMEOUT_ENV = "PANOS_API_TIMEOUT"
VERIFY_TLS_ENV = "PANOS_VERIFY_TLS"

DEFAULT_BASE_URL = "https://firewall.example.com/restapi/v11.0"
DEFAULT_TIMEOUT_SECONDS = 30.0

_FALSE_VALUES = {"0", "false", "no", "off"}
_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class FirewallConfig:
    """Connection settings shared by every tool call."""

    api_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    verify_tls: bool = True


def require_env(environ: Mapping[str, str], var_name: str) -> str:
    """Return a non-blank environment value or raise ConfigError."""
    value = environ.get(var_name, "").strip()
    if not value:
        raise ConfigError(f"{var_name} environment variable is required")
    return value


def _parse_timeout(raw: Optional[str]) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{TIMEOUT_ENV} must be a number of seconds, got {raw!r}") from exc
    if timeout <= 0:
        raise ConfigError(f"{TIMEOUT_ENV} must be positive, got {raw!r}")
    return timeout


def _parse_bool(var_name: str, raw: Optional[str], default: bool) -> bool:
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{var_name} must be true or false, got {raw!r}")


def load_config(environ: Optional[Mapping[str, str]] = None) -> FirewallConfig:
    """Build a FirewallConfig from ``environ`` (defaults to ``os.environ``).

    Raises:
        ConfigError: PANOS_API_KEY is missing, or an optional value is
            malformed.
    """
    env = os.environ if environ is None else environ

    base_url = env.get(BASE_URL_ENV, "").strip() or DEFAULT_BASE_URL
    return FirewallConfig(
        api_key=require_env(env, API_KEY_ENV),
        base_url=base_url.rstrip("/"),
        timeout=_parse_timeout(env.get(TIMEOUT_ENV)),
        verify_tls=_parse_bool(VERIFY_TLS_ENV, env.get(VERIFY_TLS_ENV), default=True),
    )
