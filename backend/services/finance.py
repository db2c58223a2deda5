"""OpenFEC campaign finance client.

Resolves a candidate (by name search or a known FEC candidate ID) and
summarizes receipts, disbursements and contribution sources for one
election cycle. Any failure degrades to the "N/A" placeholder.
"""

import copy
import logging
import math
from decimal import ROUND_HALF_UP, Decimal

import httpx

from config import settings
from services import http_client
from services.cache import cache

logger = logging.getLogger(__name__)

FEC_BASE_URL = "https://api.open.fec.gov/v1"

FALLBACK_FINANCE = {
    "total_raised": "N/A",
    "total_spent": "N/A",
    "cash_on_hand": "N/A",
    "sources": [],
}

# (label, FEC totals field, icon)
CONTRIBUTION_SOURCES = [
    ("Individual Contributions", "individual_contributions", "\N{BUST IN SILHOUETTE}"),
    ("PAC Contributions", "other_political_committee_contributions", "\N{OFFICE BUILDING}"),
    ("Party Contributions", "party_committee_contributions", "\N{CLASSICAL BUILDING}\N{VARIATION SELECTOR-16}"),
]


def fallback_finance() -> dict:
    return copy.deepcopy(FALLBACK_FINANCE)


def format_currency(amount: float | int) -> str:
    """US-style dollars: thousands separators, at most 3 decimals, no trailing zeros."""
    # ties round away from zero, not to even
    quantized = Decimal(str(amount)).quantize(Decimal("0.001"), rounding=ROUND_HALF_UP)
    text = f"{quantized:,.3f}".rstrip("0").rstrip(".")
    return f"${text}"


def _percentage(part: float, total: float) -> int:
    if total <= 0:
        return 0
    return math.floor(part / total * 100 + 0.5)


def summarize_totals(totals: dict, candidate_id: str, cycle: int) -> dict:
    """Turn one FEC totals record into the API's finance shape."""
    receipts = totals.get("receipts") or 0

    sources = []
    for label, field, icon in CONTRIBUTION_SOURCES:
        amount = totals.get(field) or 0
        if amount > 0:
            sources.append({
                "name": label,
                "amount": format_currency(amount),
                "percentage": _percentage(amount, receipts),
                "icon": icon,
            })

    return {
        "candidate_id": candidate_id,
        "cycle": cycle,
        "total_raised": format_currency(receipts),
        "total_spent": format_currency(totals.get("disbursements") or 0),
        "cash_on_hand": format_currency(totals.get("cash_on_hand_end_period") or 0),
        "sources": sources,
    }


def pick_fec_id(member: dict) -> str | None:
    """Most recent FEC candidate ID matching the member's chamber (H… / S…)."""
    fec_ids = member.get("fec_ids") or []
    prefix = "S" if member.get("office") == "Senator" else "H"
    matching = [fec_id for fec_id in fec_ids if fec_id.startswith(prefix)]
    if matching:
        return matching[-1]
    return fec_ids[-1] if fec_ids else None


async def _search_candidate(client: httpx.AsyncClient, name: str) -> str | None:
    key = f"fec-search-{name.lower()}"
    cached = cache.get(key)
    if cached:
        return cached

    resp = await client.get(
        f"{FEC_BASE_URL}/names/candidates/",
        params={"q": name, "api_key": settings.fec_api_key},
    )
    resp.raise_for_status()
    results = resp.json().get("results") or []
    if not results:
        logger.info("No FEC candidate found for %r", name)
        return None

    candidate_id = results[0].get("id")
    if candidate_id:
        cache.set(key, candidate_id)
    return candidate_id


async def _fetch_totals(client: httpx.AsyncClient, candidate_id: str, cycle: int) -> dict | None:
    key = f"finance-{candidate_id}-{cycle}"
    cached = cache.get(key)
    if cached:
        return cached

    resp = await client.get(
        f"{FEC_BASE_URL}/candidate/{candidate_id}/totals/",
        params={"cycle": cycle, "api_key": settings.fec_api_key},
    )
    resp.raise_for_status()
    results = resp.json().get("results") or []
    if not results:
        logger.info("No FEC totals for %s in %d", candidate_id, cycle)
        return None

    result = summarize_totals(results[0], candidate_id, cycle)
    cache.set(key, result)
    return result


async def get_campaign_finance(
    name: str | None = None,
    candidate_id: str | None = None,
    cycle: int | None = None,
) -> dict:
    """Finance summary for a candidate ID, or for the first FEC name match."""
    cycle = cycle or settings.fec_cycle
    if not settings.fec_api_key:
        return fallback_finance()

    try:
        async with http_client.get_client() as client:
            if not candidate_id and name:
                candidate_id = await _search_candidate(client, name)
            if not candidate_id:
                return fallback_finance()
            result = await _fetch_totals(client, candidate_id, cycle)
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("FEC lookup failed for %s: %s", candidate_id or name, e)
        return fallback_finance()

    return result if result else fallback_finance()
