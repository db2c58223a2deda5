import time

import httpx
import pytest
from fastapi.testclient import TestClient

from config import settings
from services import http_client
from services.cache import cache


def _legislator(bioguide, first, last, term_type, state, district=None, party="Democrat", fec=None):
    term = {"type": term_type, "state": state, "party": party, "url": f"https://{last.lower()}.example.gov"}
    if term_type == "rep":
        term["district"] = district
    else:
        term["phone"] = "202-224-1111"
    return {
        "id": {"bioguide": bioguide, "fec": fec or []},
        "name": {"first": first, "last": last, "official_full": f"{first} {last}"},
        "terms": [{"type": "rep", "state": state, "district": 1}, term],
    }


ROSTER = [
    _legislator("S000148", "Charles", "Schumer", "sen", "NY", fec=["S8NY00082"]),
    _legislator("G000555", "Kirsten", "Gillibrand", "sen", "NY", fec=["H6NY20167", "S0NY00410"]),
    _legislator("G000599", "Daniel", "Goldman", "rep", "NY", district=10, fec=["H2NY10092"]),
    _legislator("N000002", "Jerrold", "Nadler", "rep", "NY", district=12, fec=["H2NY17071"]),
    _legislator("S000033", "Bernard", "Sanders", "sen", "VT", party="Independent", fec=["S4VT00033"]),
    _legislator("W000800", "Peter", "Welch", "sen", "VT", fec=["S2VT00138"]),
    _legislator("B001318", "Becca", "Balint", "rep", "VT", district=0, fec=["H2VT01076"]),
    _legislator("P000145", "Alex", "Padilla", "sen", "CA", fec=["S2CA00955"]),
    _legislator("P000197", "Nancy", "Pelosi", "rep", "CA", district=11, fec=["H8CA05035"]),
]


def _offline(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("network disabled in tests", request=request)


def _install(monkeypatch, handler):
    monkeypatch.setattr(
        http_client,
        "get_client",
        lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


@pytest.fixture(autouse=True)
def isolated(monkeypatch):
    """Empty cache, no API keys, and every outbound request fails."""
    cache.clear()
    monkeypatch.setattr(settings, "congress_api_key", None)
    monkeypatch.setattr(settings, "fec_api_key", None)
    monkeypatch.setattr(settings, "google_civic_api_key", None)
    monkeypatch.setattr(settings, "default_state", "CA")
    _install(monkeypatch, _offline)
    yield
    cache.clear()


@pytest.fixture
def mock_http(monkeypatch):
    """Serve outbound requests from ``handler(request) -> httpx.Response``."""

    def install(handler):
        _install(monkeypatch, handler)

    return install


@pytest.fixture
def roster_handler():
    """Handler serving ROSTER for the legislators URL, 404 for anything else."""
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(str(request.url))
        if request.url.path.endswith("legislators-current.json"):
            return httpx.Response(200, json=ROSTER)
        return httpx.Response(404, json={"error": "not found"})

    handler.calls = calls
    return handler


@pytest.fixture
def clock(monkeypatch):
    """Controllable time.time(); advance with ``clock.advance(seconds)``."""

    class Clock:
        now = 1_700_000_000.0

        def advance(self, seconds):
            self.now += seconds

    c = Clock()
    monkeypatch.setattr(time, "time", lambda: c.now)
    return c


@pytest.fixture
def client():
    from app import app

    return TestClient(app)
