"""Weight Range Handler — imperative shell around the pure calculator.

Invariants:
    - compute_weight_range is called exactly once per request
    - The usage counter is incremented only when counts_toward_usage() holds
    - An invalid outcome is returned as data (valid=False), never raised

Design Decisions:
    - The calculator and the counter never call each other; this handler is
      the caller that sequences them
"""

import logging

from weightrange.core.weight_range import (
    InvalidInput, WeightInput, compute_weight_range, counts_toward_usage,
)
from weightrange.schemas.weight_range import WeightRangeResponse, WeightResultOut
from weightrange.services.usage_counter import UsageCounter

logger = logging.getLogger(__name__)


async def handle_weight_range(
    inp: WeightInput, counter: UsageCounter,
) -> WeightRangeResponse:
    """Compute the range and, for adults, record the calculation."""
    outcome = compute_weight_range(inp)
    if isinstance(outcome, InvalidInput):
        logger.debug(f"No result: {outcome.field} {outcome.reason}")
        return WeightRangeResponse(
            valid=False,
            invalid_field=outcome.field,
            invalid_reason=outcome.reason,
        )

    usage_count = None
    if counts_toward_usage(inp, outcome):
        usage_count = await counter.increment_and_read()

    return WeightRangeResponse(
        valid=True,
        result=WeightResultOut.model_validate(outcome),
        usage_count=usage_count,
    )
