import sys
from pathlib import Path
from typing import Any, List

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.config import FirewallConfig
from core.dispatcher import Dispatcher
from core.errors import FirewallAPIError
from core.models import RequestDescriptor


class RecordingClient:
    """Fake HTTP collaborator: records requests, returns a canned payload."""

    def __init__(self, payload: Any = None, error: Exception = None):
        self.payload = {"result": {"@status": "success"}} if payload is None else payload
        self.error = error
        self.requests: List[RequestDescriptor] = []

    def execute(self, request: RequestDescriptor) -> Any:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def config() -> FirewallConfig:
    return FirewallConfig(api_key="test-key", base_url="https://fw.test/restapi/v11.0")


@pytest.fixture
def client() -> RecordingClient:
    return RecordingClient()


@pytest.fixture
def dispatcher(config, client) -> Dispatcher:
    return Dispatcher(config, client=client)


@pytest.fixture
def failing_client() -> RecordingClient:
    return RecordingClient(error=FirewallAPIError("Request failed with status code 403: Forbidden", status=403))
