"""Secondary data routes: voting record snippets and campaign finance."""

from fastapi import APIRouter, Query

from services.congress import get_voting_record
from services.finance import get_campaign_finance

router = APIRouter()


@router.get("/api/voting-record/{name}")
async def voting_record(name: str) -> dict:
    """Recent bill activity. Pass a Bioguide ID for a member's sponsored bills."""
    return await get_voting_record(name)


@router.get("/api/campaign-finance/{name}")
async def campaign_finance(
    name: str,
    cycle: int | None = Query(None, ge=1980, le=2100),
) -> dict:
    """FEC totals for the first candidate matching ``name``."""
    return await get_campaign_finance(name=name, cycle=cycle)
