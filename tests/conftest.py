"""Pytest configuration and fixtures."""

import json

import pytest
import requests

import talentlms_api_client.client as client_mod
from talentlms_api_client import TalentLmsClient


class FakeResponse:
    """Just enough of :class:`requests.Response` for the client."""

    def __init__(self, status_code=200, payload=None, text=None, reason="OK"):
        self.status_code = status_code
        self.reason = reason
        if text is None:
            text = "" if payload is None else json.dumps(payload)
        self.text = text

    def json(self):
        return json.loads(self.text)


class FakeTransport:
    """Records every call and answers with queued responses in order."""

    def __init__(self):
        self.calls = []
        self._responses = []

    def queue(self, payload=None, status_code=200, **kwargs):
        self._responses.append(FakeResponse(status_code=status_code, payload=payload, **kwargs))

    def fail_with(self, exc):
        self._responses.append(exc)

    @property
    def urls(self):
        return [call["url"] for call in self.calls]

    def __call__(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self._responses:
            raise AssertionError(f"Unexpected request: {method} {url}")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def transport(monkeypatch):
    """Replace the HTTP layer of the client module with a recording fake."""
    fake = FakeTransport()
    monkeypatch.setattr(client_mod.requests, "request", fake)
    return fake


@pytest.fixture
def client():
    return TalentLmsClient(api_key="test-api-key", subdomain="test-domain")


@pytest.fixture
def connection_error():
    return requests.ConnectionError("Name or service not known")
