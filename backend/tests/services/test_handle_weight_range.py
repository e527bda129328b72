"""Weight Range Handler — verifies the compute-then-count control flow.

Tests:
    - Adult valid input increments the counter once
    - Minors and invalid input never touch the counter
    - A counter write failure propagates to the caller
"""

import pytest

from weightrange.core.domain_types import Sex, BoneStructure
from weightrange.core.errors import CounterWriteError
from weightrange.core.weight_range import WeightInput
from weightrange.services.handle_weight_range import handle_weight_range
from weightrange.services.usage_counter import UsageCounter
from tests.services.flaky_store import FlakyStore


def _input(age=30, inches=2):
    return WeightInput(
        sex=Sex.FEMALE, age_years=age, height_feet=5, height_inches=inches,
        bone_structure=BoneStructure.LARGE,
    )


async def test_adult_valid_input_counts_once(counter, memory_store):
    response = await handle_weight_range(_input(), counter)
    assert response.valid is True
    assert response.usage_count == 1
    assert response.result.adjusted_frame_weight_lbs == pytest.approx(110 * 1.07)
    assert memory_store.writes == 1


async def test_minor_does_not_count(counter, memory_store):
    response = await handle_weight_range(_input(age=17), counter)
    assert response.valid is True
    assert response.usage_count is None
    assert memory_store.reads == 0


async def test_invalid_input_returns_reason(counter, memory_store):
    response = await handle_weight_range(_input(inches=-2), counter)
    assert response.valid is False
    assert response.result is None
    assert response.invalid_field == "height_inches"
    assert "between 0 and 11" in response.invalid_reason
    assert memory_store.reads == 0


async def test_write_failure_propagates():
    counter = UsageCounter(FlakyStore(fail_write=True))
    with pytest.raises(CounterWriteError):
        await handle_weight_range(_input(), counter)
