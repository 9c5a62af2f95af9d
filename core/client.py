# =============================================================================
# core/client.py  —  HTTP collaborator for the PAN-OS REST API
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Executes ONE RequestDescriptor against the firewall and returns the
#   decoded JSON.  Nothing more: no retries, no reshaping of the payload.
#
# FAILURES:
#   Every way a request can go wrong (HTTP error status, refused connection,
#   timeout, a body that isn't JSON) comes out as FirewallAPIError.  The
#   dispatcher turns that into the agent-facing error; this module doesn't
#   decide what the agent sees.
# =============================================================================

import json
import logging
import socket
import ssl
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Optional

from core.config import FirewallConfig
from core.errors import FirewallAPIError
from core.models import RequestDescriptor

logger = logging.getLogger(__name__)


class PanosClient:
    """Sends requests to the firewall with the configured API key."""

    def __init__(self, config: FirewallConfig):
        self.config = config
        self._ssl_context = self._build_ssl_context(config.verify_tls)

    @staticmethod
    def _build_ssl_context(verify_tls: bool) -> Optional[ssl.SSLContext]:
        if verify_tls:
            return None  # urllib's default verifying context
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        return context

    def build_url(self, request: RequestDescriptor) -> str:
        """Join base URL, path and url-encoded query."""
        url = self.config.base_url.rstrip("/") + request.path
        if request.query:
            url += "?" + urllib.parse.urlencode(request.query)
        return url

    def build_http_request(self, request: RequestDescriptor) -> urllib.request.Request:
        headers = {
            "X-PAN-KEY": self.config.api_key,
            "Accept": "application/json",
        }
        data = None
        if request.method == "POST":
            data = json.dumps(request.body if request.body is not None else {}).encode("utf-8")
            headers["Content-Type"] = "application/json"

        return urllib.request.Request(
            self.build_url(request),
            data=data,
            headers=headers,
            method=request.method,
        )

    def execute(self, request: RequestDescriptor) -> Any:
        """Perform ``request`` and return the decoded JSON body.

        Returns None when the firewall answers with an empty body.

        Raises:
            FirewallAPIError: on any HTTP, network or decoding failure.
        """
        http_request = self.build_http_request(request)
        logger.debug("%s %s", request.method, http_request.full_url)

        try:
            with urllib.request.urlopen(
                http_request, timeout=self.config.timeout, context=self._ssl_context
            ) as response:
                raw = response.read()
        except urllib.error.HTTPError as e:
            raise FirewallAPIError(
                f"Request failed with status code {e.code}: {e.reason}", status=e.code
            ) from e
        except urllib.error.URLError as e:
            raise FirewallAPIError(f"Could not reach firewall: {e.reason}") from e
        except (socket.timeout, TimeoutError) as e:
            raise FirewallAPIError(f"timeout of {self.config.timeout}s exceeded") from e
        except OSError as e:
            raise FirewallAPIError(f"Connection error: {e}") from e

        if not raw.strip():
            return None
        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise FirewallAPIError(f"Firewall returned a non-JSON response: {e}") from e
