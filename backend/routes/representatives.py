"""Representative lookup routes: by ZIP code and by free-form address.

ZIP and address → state/district resolution is approximate (static ZIP
prefix table); every response carries an ``accuracy`` note saying so.
"""

import logging

import httpx
from fastapi import APIRouter, Query

from errors import MissingAddressError, StateNotFoundError
from services import civic, legislators
from services.finance import get_campaign_finance, pick_fec_id
from services.links import member_links
from services.zip_lookup import (
    STATE_NAMES,
    districts_for_zip,
    is_known_prefix,
    normalize_zip,
    state_for_zip,
    state_from_address,
    zip_from_address,
)

logger = logging.getLogger(__name__)

router = APIRouter()

ZIP_ACCURACY = (
    "Approximate: state and district are inferred from the ZIP code prefix. "
    "For exact district matching, a geocoding service is needed."
)
STATE_ACCURACY = (
    "Note: Shows your senators and a representative from your state. "
    "For exact district matching, a geocoding service is needed."
)
CIVIC_ACCURACY = "Address-level match from the Google Civic Information API."


def _with_links(members: list[dict]) -> list[dict]:
    return [{**member, "links": member_links(member)} for member in members]


@router.get("/api/congressman/{zipcode}")
async def congressman_by_zip(zipcode: str) -> dict:
    """Senators and House member for a ZIP code, with finance and links."""
    zipcode = normalize_zip(zipcode)
    state = state_for_zip(zipcode)
    districts = districts_for_zip(zipcode)

    result = {
        "zipcode": zipcode,
        "state": state,
        "state_name": STATE_NAMES.get(state),
        "districts": districts,
        "method": "ZIP prefix lookup" if is_known_prefix(zipcode) else "Default state (unknown ZIP prefix)",
        "accuracy": ZIP_ACCURACY,
    }

    try:
        members = await legislators.members_for_state(state, districts)
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("Legislator roster unavailable for ZIP %s: %s", zipcode, e)
        placeholder = legislators.placeholder_member(state, districts[0] if districts else None)
        return {
            **result,
            "error": True,
            "message": "Unable to fetch representative data",
            "representatives": [placeholder],
            "congressman": placeholder,
        }

    members = _with_links(members)
    congressman = next((m for m in members if m["office"] == "Representative"), None)
    if congressman:
        congressman["campaign_finance"] = await get_campaign_finance(
            name=congressman["name"],
            candidate_id=pick_fec_id(congressman),
        )

    logger.info("ZIP %s → %s (%d members)", zipcode, state, len(members))
    return {**result, "representatives": members, "congressman": congressman}


@router.get("/api/representatives")
async def representatives_by_address(address: str | None = Query(None)) -> dict:
    """Senators and a representative for a free-form postal address."""
    if not address or not address.strip():
        raise MissingAddressError()
    address = address.strip()

    state = state_from_address(address)
    if not state:
        raise StateNotFoundError(address)

    logger.info("Finding representatives for state %s", state)

    civic_members = await civic.representatives_by_address(address)
    if civic_members:
        return {
            "representatives": _with_links(legislators.sort_members(civic_members)),
            "address": address,
            "state": state,
            "method": "Google Civic lookup",
            "accuracy": CIVIC_ACCURACY,
        }

    zipcode = zip_from_address(address)
    districts = districts_for_zip(zipcode) if zipcode and state_for_zip(zipcode) == state else []

    try:
        members = await legislators.members_for_state(state, districts)
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("Legislator roster unavailable for %s: %s", state, e)
        return {
            "error": True,
            "message": "Unable to fetch representative data",
            "representatives": [],
        }

    return {
        "representatives": _with_links(members),
        "address": address,
        "state": state,
        "method": "State-based lookup",
        "accuracy": STATE_ACCURACY,
    }
