"""Shared test fixtures."""

import json

import pytest
import requests

from xrate import RateClient, static_key

BASE_URL = "http://api.example.com/api/"


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, body: str, status_code: int = 200):
        self.text = body
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Records requested URLs and replies with a canned body, response or error."""

    def __init__(
        self,
        body: str = "",
        status_code: int = 200,
        error: Exception | None = None,
        responder=None,
    ):
        self.body = body
        self.status_code = status_code
        self.error = error
        self.responder = responder
        self.calls: list[tuple[str, float]] = []

    def get(self, url: str, timeout: float):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        if self.responder is not None:
            return self.responder(url)
        return FakeResponse(self.body, self.status_code)


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def fake_session():
    """Factory for FakeSession instances."""
    return FakeSession


@pytest.fixture
def stub_rates():
    """Session returning {"rates": {"USD": 1.2, "EUR": 1.0}}."""
    return FakeSession(json.dumps({"base": "EUR", "rates": {"USD": 1.2, "EUR": 1.0}}))


@pytest.fixture
def make_client():
    """Build a RateClient over the given fake session, with key "k1" unless told otherwise."""

    def _make(session, key: str = "k1") -> RateClient:
        return RateClient(BASE_URL, key_provider=static_key(key), session=session)

    return _make
