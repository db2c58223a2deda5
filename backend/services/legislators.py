"""Current members of Congress from the @unitedstates congress-legislators project.

The full roster is a single JSON file (~540 members), so it is fetched once
and filtered in memory.
"""

import logging

from services import http_client
from services.cache import cache

logger = logging.getLogger(__name__)

LEGISLATORS_URL = "https://unitedstates.github.io/congress-legislators/legislators-current.json"

SENATE_PHONE = "(202) 224-0000"
HOUSE_PHONE = "(202) 225-0000"


async def fetch_legislators() -> list[dict]:
    """Return the current-legislators roster. Raises httpx.HTTPError on failure."""
    cached = cache.get("legislators-current")
    if cached:
        return cached

    async with http_client.get_client() as client:
        resp = await client.get(LEGISLATORS_URL)
        resp.raise_for_status()
        legislators = resp.json()

    logger.info("Loaded %d current legislators", len(legislators))
    cache.set("legislators-current", legislators)
    return legislators


def current_term(legislator: dict) -> dict:
    terms = legislator.get("terms") or []
    return terms[-1] if terms else {}


def _full_name(legislator: dict) -> str:
    name = legislator.get("name", {})
    return name.get("official_full") or f"{name.get('first', '')} {name.get('last', '')}".strip()


def to_member(legislator: dict) -> dict:
    """Flatten a roster entry into the API's member shape."""
    term = current_term(legislator)
    is_senator = term.get("type") == "sen"
    ids = legislator.get("id", {})
    return {
        "name": _full_name(legislator),
        "office": "Senator" if is_senator else "Representative",
        "party": term.get("party"),
        "state": term.get("state"),
        "district": None if is_senator else term.get("district"),
        "phone": term.get("phone") or (SENATE_PHONE if is_senator else HOUSE_PHONE),
        "website": term.get("url"),
        "address": term.get("address"),
        "bioguide_id": ids.get("bioguide"),
        "fec_ids": ids.get("fec", []),
    }


def _members_of(legislators: list[dict], state: str, term_type: str) -> list[dict]:
    result = []
    for legislator in legislators:
        term = current_term(legislator)
        if term.get("state") == state and term.get("type") == term_type:
            result.append(legislator)
    return result


def senators_for_state(legislators: list[dict], state: str) -> list[dict]:
    return [to_member(sen) for sen in _members_of(legislators, state, "sen")[:2]]


def representative_for(legislators: list[dict], state: str, districts: list[int] | None = None) -> dict | None:
    """House member for the first matching district, else the state's first listed member."""
    reps = _members_of(legislators, state, "rep")
    if not reps:
        return None

    for district in districts or []:
        for rep in reps:
            if current_term(rep).get("district") == district:
                return to_member(rep)

    return to_member(reps[0])


def sort_members(members: list[dict]) -> list[dict]:
    """Senators before representatives, then alphabetical."""
    return sorted(members, key=lambda m: (m["office"] != "Senator", m.get("name") or ""))


async def members_for_state(state: str, districts: list[int] | None = None) -> list[dict]:
    """Senators plus one representative for a state, sorted senators first."""
    legislators = await fetch_legislators()
    members = senators_for_state(legislators, state)
    rep = representative_for(legislators, state, districts)
    if rep:
        members.append(rep)
    return sort_members(members)


def placeholder_member(state: str, district: int | None = None) -> dict:
    """Stand-in member returned when the roster cannot be fetched."""
    return {
        "name": "Data Temporarily Unavailable",
        "office": "Representative",
        "party": "Unknown",
        "state": state,
        "district": district,
        "phone": HOUSE_PHONE,
        "website": "https://www.house.gov/representatives/find-your-representative",
        "address": None,
        "bioguide_id": None,
        "fec_ids": [],
    }
