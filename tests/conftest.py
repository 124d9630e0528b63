import json

import pytest

from instafood.core.config import Settings
from instafood.services import upstream_service
from main import create_app

UPSTREAM = "https://upstream.test/dapi"


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text
        if text is not None:
            self.content = text.encode("utf-8")
        elif payload is not None:
            self.content = json.dumps(payload).encode("utf-8")
        else:
            self.content = b""

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if self._payload is None:
            if self.text is not None:
                return json.loads(self.text)
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class UpstreamRecorder:
    """Stands in for requests.get; records calls and replays queued outcomes."""

    def __init__(self):
        self.calls = []
        self.outcomes = []

    def queue(self, outcome):
        self.outcomes.append(outcome)

    def __call__(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        outcome = self.outcomes.pop(0) if self.outcomes else FakeResponse(payload={})
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class StubSettings(Settings):
    UPSTREAM_BASE_URL = UPSTREAM
    UPSTREAM_TIMEOUT = None
    LOG_LEVEL = "DEBUG"


@pytest.fixture()
def upstream(monkeypatch):
    recorder = UpstreamRecorder()
    monkeypatch.setattr(upstream_service.requests, "get", recorder)
    return recorder


@pytest.fixture()
def app():
    app = create_app(StubSettings())
    app.config["TESTING"] = True
    return app


@pytest.fixture()
def client(app, upstream):
    return app.test_client()
