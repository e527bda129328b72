"""Weight Range Route — computes the healthy weight range server-side.

Invariants:
    - Out-of-domain numbers answer 200 with valid=false (no result, not a fault)
    - Malformed bodies (unknown sex, non-numeric height) answer 400
"""

from fastapi import APIRouter, Depends

from weightrange.schemas.weight_range import WeightRangeRequest, WeightRangeResponse
from weightrange.services.handle_weight_range import handle_weight_range
from weightrange.services.usage_counter import UsageCounter, get_usage_counter

router = APIRouter(prefix="/weight-range", tags=["weight-range"])


@router.post("", response_model=WeightRangeResponse)
async def calculate_weight_range(
    body: WeightRangeRequest,
    counter: UsageCounter = Depends(get_usage_counter),
):
    """Compute the range; adult calculations also increment the usage count."""
    return await handle_weight_range(body.to_input(), counter)
