"""Outbound links for a member: profile pages, floor calendar, transcripts."""

import json
import re

import httpx

CONGRESS_GOV = "https://www.congress.gov"
BIOGUIDE_URL = "https://bioguide.congress.gov/search/bio/{bioguide_id}"
CSPAN_SEARCH = "https://www.c-span.org/search/"

FLOOR_CALENDARS = {
    "Senator": "https://www.senate.gov/legislative/schedule/floor_schedule.htm",
    "Representative": "https://clerk.house.gov/FloorSummary",
}


def _slug(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


def member_links(member: dict) -> dict:
    name = member.get("name") or ""
    bioguide_id = member.get("bioguide_id")

    links: dict = {
        "website": member.get("website"),
        "calendar": FLOOR_CALENDARS.get(member.get("office"), FLOOR_CALENDARS["Representative"]),
        "transcripts": {
            "congressional_record": str(httpx.URL(
                f"{CONGRESS_GOV}/search",
                params={"q": json.dumps({"source": "congrecord", "search": name})},
            )),
            "cspan": str(httpx.URL(CSPAN_SEARCH, params={"searchtype": "Person", "query": name})),
        },
    }
    if bioguide_id:
        links["profile"] = f"{CONGRESS_GOV}/member/{_slug(name)}/{bioguide_id}"
        links["bioguide"] = BIOGUIDE_URL.format(bioguide_id=bioguide_id)
    return links
