"""Usage Routes — read and increment the persisted calculation count.

Invariants:
    - GET /usage always answers 200 (degrades to 0 on unreadable storage)
    - POST /usage/increment answers the count AFTER incrementing
    - A failed write surfaces as 503 via the global WeightRangeError handler
"""

from fastapi import APIRouter, Depends

from weightrange.schemas.usage import UsageResponse
from weightrange.services.usage_counter import UsageCounter, get_usage_counter

router = APIRouter(prefix="/usage", tags=["usage"])


@router.get("", response_model=UsageResponse)
async def read_usage(counter: UsageCounter = Depends(get_usage_counter)):
    """Current number of counted calculations."""
    return UsageResponse(count=await counter.read())


@router.post("/increment", response_model=UsageResponse)
async def increment_usage(counter: UsageCounter = Depends(get_usage_counter)):
    """Record one successful adult calculation."""
    return UsageResponse(count=await counter.increment_and_read())
