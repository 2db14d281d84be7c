import json
import os
import sys
from pathlib import Path

import httpx
import pytest

BASE_DIR = Path(__file__).resolve().parents[1]
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

os.environ.setdefault("GATEWAYAPI_TOKEN", "test-token")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from gatewayapi_sms.core.config import get_settings
from gatewayapi_sms.services.gatewayapi_client import BASE_URL, GatewayApiClient

get_settings.cache_clear()


class RecordingTransport:
    """Collects every request and answers with queued outcomes."""

    def __init__(self, outcomes: list[object] | None = None):
        self.outcomes = list(outcomes or [])
        self.requests: list[httpx.Request] = []

    def queue(self, outcome: object) -> None:
        self.outcomes.append(outcome)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        outcome = self.outcomes.pop(0) if self.outcomes else httpx.Response(200, json={})
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content)


@pytest.fixture()
def transport():
    return RecordingTransport()


@pytest.fixture()
def http_client(transport):
    with httpx.Client(base_url=BASE_URL, transport=httpx.MockTransport(transport)) as client:
        yield client


@pytest.fixture()
def gateway(http_client):
    return GatewayApiClient("test-token", http_client=http_client)
