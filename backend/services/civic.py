"""Google Civic Information client for address → federal legislators.

Only used when GOOGLE_CIVIC_API_KEY is set. Returns None on any failure so
callers fall back to the state-based roster lookup.
"""

import logging
import re

import httpx

from config import settings
from services import http_client
from services.cache import cache

logger = logging.getLogger(__name__)

CIVIC_URL = "https://www.googleapis.com/civicinfo/v2/representatives"

_DISTRICT = re.compile(r"/cd:(\d+)$")
_STATE = re.compile(r"/state:([a-z]{2})")


def _format_address(parts: list[dict]) -> str | None:
    if not parts:
        return None
    addr = parts[0]
    street = " ".join(v for v in (addr.get("line1"), addr.get("line2")) if v)
    return f"{street}, {addr.get('city', '')}, {addr.get('state', '')} {addr.get('zip', '')}".strip(", ")


def parse_officials(data: dict) -> list[dict]:
    """Map Civic offices/officials into member dicts."""
    officials = data.get("officials") or []
    members = []
    for office in data.get("offices") or []:
        roles = office.get("roles") or []
        is_senator = "legislatorUpperBody" in roles
        division = office.get("divisionId", "")
        district_match = _DISTRICT.search(division)
        state_match = _STATE.search(division)

        for index in office.get("officialIndices") or []:
            if index >= len(officials):
                continue
            official = officials[index]
            phones = official.get("phones") or []
            urls = official.get("urls") or []
            members.append({
                "name": official.get("name"),
                "office": "Senator" if is_senator else "Representative",
                "party": official.get("party"),
                "state": state_match.group(1).upper() if state_match else None,
                "district": None if is_senator else (int(district_match.group(1)) if district_match else 0),
                "phone": phones[0] if phones else None,
                "website": urls[0] if urls else None,
                "address": _format_address(official.get("address") or []),
                "bioguide_id": None,
                "fec_ids": [],
            })
    return members


async def representatives_by_address(address: str) -> list[dict] | None:
    if not settings.google_civic_api_key:
        return None

    key = f"civic-{address.lower()}"
    cached = cache.get(key)
    if cached:
        return cached

    try:
        async with http_client.get_client() as client:
            resp = await client.get(
                CIVIC_URL,
                params={
                    "address": address,
                    "key": settings.google_civic_api_key,
                    "levels": "country",
                    "roles": ["legislatorUpperBody", "legislatorLowerBody"],
                },
            )
            resp.raise_for_status()
            members = parse_officials(resp.json())
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("Google Civic lookup failed: %s", e)
        return None

    if not members:
        return None
    cache.set(key, members)
    return members
