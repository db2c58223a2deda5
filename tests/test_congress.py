import asyncio

import httpx
import pytest

from config import settings
from services import congress

BILLS = {
    "bills": [
        {
            "type": "HR",
            "number": "815",
            "title": "Making emergency supplemental appropriations",
            "updateDateIncludingText": "2024-04-25",
            "latestAction": {"text": "Became Public Law No: 118-50."},
        },
        {"type": "S", "number": "12", "title": None},
    ]
}

SPONSORED = {
    "sponsoredLegislation": [
        {
            "type": "HR",
            "number": "7024",
            "title": "Tax Relief for American Families and Workers Act",
            "introducedDate": "2024-01-17",
            "latestAction": {"text": "Placed on Senate calendar"},
        }
    ]
}


@pytest.fixture
def congress_key(monkeypatch):
    monkeypatch.setattr(settings, "congress_api_key", "test-key")


def test_bioguide_detection():
    assert congress.is_bioguide_id("N000002")
    assert not congress.is_bioguide_id("Jerrold Nadler")
    assert not congress.is_bioguide_id("n000002")


def test_to_vote_entry_defaults():
    entry = congress.to_vote_entry({"type": "S", "number": "12"})
    assert entry == {
        "bill": "S 12 - No title",
        "date": "Unknown",
        "vote": "See Details",
        "description": "No description",
        "status": "In progress",
    }


def test_no_api_key_returns_sample():
    assert asyncio.run(congress.get_voting_record("Nadler")) == congress.FALLBACK_VOTES


def test_recent_bills(congress_key, mock_http):
    def handler(request):
        assert request.url.path == "/v3/bill/118"
        assert request.url.params["limit"] == "10"
        assert request.url.params["api_key"] == "test-key"
        return httpx.Response(200, json=BILLS)

    mock_http(handler)
    result = asyncio.run(congress.get_voting_record("Jerrold Nadler"))
    assert result["source"] == "congress.gov"
    assert result["votes"][0] == {
        "bill": "HR 815 - Making emergency supplemental appropriations",
        "date": "2024-04-25",
        "vote": "See Details",
        "description": "Making emergency supplemental appropriations",
        "status": "Became Public Law No: 118-50.",
    }
    assert result["votes"][1]["bill"] == "S 12 - No title"


def test_sponsored_legislation_for_bioguide(congress_key, mock_http):
    def handler(request):
        assert request.url.path == "/v3/member/N000002/sponsored-legislation"
        return httpx.Response(200, json=SPONSORED)

    mock_http(handler)
    result = asyncio.run(congress.get_voting_record("N000002"))
    assert result["votes"][0]["vote"] == "Sponsor"
    assert result["votes"][0]["date"] == "2024-01-17"


def test_empty_result_returns_sample(congress_key, mock_http):
    mock_http(lambda request: httpx.Response(200, json={"bills": []}))
    assert asyncio.run(congress.get_voting_record("anyone")) == congress.FALLBACK_VOTES


def test_http_failure_returns_sample(congress_key, mock_http):
    mock_http(lambda request: httpx.Response(503))
    assert asyncio.run(congress.get_voting_record("anyone")) == congress.FALLBACK_VOTES


def test_bad_json_returns_sample(congress_key, mock_http):
    mock_http(lambda request: httpx.Response(200, content=b"<html>down</html>"))
    assert asyncio.run(congress.get_voting_record("anyone")) == congress.FALLBACK_VOTES
