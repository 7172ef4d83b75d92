import json

import httpx
import pytest

from vpic_lookup.config import Settings
from vpic_lookup.services.nhtsa import NHTSAService


class RecordingHandler:
    """MockTransport handler that records requests and replays a canned reply"""

    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self.payload = payload
        self.text = text
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, content=json.dumps(self.payload))


def _decode_payload(pairs, count=None):
    return {
        "Count": len(pairs) if count is None else count,
        "Message": "Results returned successfully",
        "Results": [{"Variable": k, "Value": v, "VariableId": i} for i, (k, v) in enumerate(pairs)],
    }


@pytest.fixture
def handler_cls():
    return RecordingHandler


@pytest.fixture
def decode_payload():
    return _decode_payload


@pytest.fixture
def config():
    return Settings()


@pytest.fixture
def make_service(config):
    services = []

    def _make(handler):
        service = NHTSAService(config, transport=httpx.MockTransport(handler))
        services.append(service)
        return service

    yield _make
    for service in services:
        service.close()
