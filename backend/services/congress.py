"""Congress.gov client for recent legislative activity.

Congress.gov does not expose per-member roll-call positions, so the "voting
record" is recent bill activity: a member's sponsored legislation when a
Bioguide ID is given, otherwise the most recently updated bills.
"""

import copy
import logging
import re

import httpx

from config import settings
from services import http_client
from services.cache import cache

logger = logging.getLogger(__name__)

CONGRESS_BASE_URL = "https://api.congress.gov/v3"
RECORD_LIMIT = 10

BIOGUIDE_ID = re.compile(r"^[A-Z]\d{6}$")

FALLBACK_VOTES = {
    "votes": [
        {
            "bill": "H.R. 1234 - Infrastructure Investment Act",
            "date": "2024-03-15",
            "vote": "Yes",
            "description": "A bill to provide funding for national infrastructure improvements",
        }
    ],
    "source": "sample",
}


def fallback_votes() -> dict:
    return copy.deepcopy(FALLBACK_VOTES)


def is_bioguide_id(value: str) -> bool:
    return bool(BIOGUIDE_ID.match(value))


def to_vote_entry(bill: dict, vote: str = "See Details") -> dict:
    title = bill.get("title") or "No title"
    latest = bill.get("latestAction") or {}
    number = bill.get("number") or bill.get("amendmentNumber") or ""
    return {
        "bill": f"{bill.get('type') or 'AMDT'} {number} - {title}",
        "date": bill.get("updateDateIncludingText") or bill.get("introducedDate") or "Unknown",
        "vote": vote,
        "description": bill.get("title") or "No description",
        "status": latest.get("text") or "In progress",
    }


async def _get_json(client: httpx.AsyncClient, path: str, params: dict) -> dict:
    resp = await client.get(
        f"{CONGRESS_BASE_URL}{path}",
        params={**params, "api_key": settings.congress_api_key, "format": "json"},
    )
    resp.raise_for_status()
    return resp.json()


async def recent_bills(client: httpx.AsyncClient) -> list[dict]:
    key = f"bills-{settings.congress_number}"
    cached = cache.get(key)
    if cached:
        return cached

    data = await _get_json(
        client,
        f"/bill/{settings.congress_number}",
        {"limit": RECORD_LIMIT, "sort": "updateDate desc"},
    )
    votes = [to_vote_entry(bill) for bill in data.get("bills") or []]
    if votes:
        cache.set(key, votes)
    return votes


async def sponsored_legislation(client: httpx.AsyncClient, bioguide_id: str) -> list[dict]:
    key = f"sponsored-{bioguide_id}"
    cached = cache.get(key)
    if cached:
        return cached

    data = await _get_json(client, f"/member/{bioguide_id}/sponsored-legislation", {"limit": RECORD_LIMIT})
    votes = [to_vote_entry(bill, vote="Sponsor") for bill in data.get("sponsoredLegislation") or []]
    if votes:
        cache.set(key, votes)
    return votes


async def get_voting_record(name: str) -> dict:
    """Recent legislative activity for a member, or the sample record."""
    if not settings.congress_api_key:
        return fallback_votes()

    try:
        async with http_client.get_client() as client:
            if is_bioguide_id(name):
                votes = await sponsored_legislation(client, name)
            else:
                votes = await recent_bills(client)
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("Congress.gov lookup failed for %s: %s", name, e)
        return fallback_votes()

    if not votes:
        return fallback_votes()
    return {"votes": votes, "source": "congress.gov"}
