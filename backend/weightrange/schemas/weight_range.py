"""Weight Range Schemas — calculation request and response envelopes.

Invariants:
    - WeightRangeRequest accepts any finite number for the numeric fields;
      out-of-domain values produce valid=false, not a 400
    - Exactly one of result / invalid_* is populated
"""

from pydantic import BaseModel, ConfigDict, Field

from weightrange.core.domain_types import (
    Sex, BoneStructure, HealthStatus, BmiClassification,
)
from weightrange.core.weight_range import WeightInput


class WeightRangeRequest(BaseModel):
    """One calculation request in imperial units."""
    model_config = ConfigDict(allow_inf_nan=False)

    sex: Sex
    age_years: float
    height_feet: float
    height_inches: float
    bone_structure: BoneStructure = BoneStructure.MEDIUM

    def to_input(self) -> WeightInput:
        return WeightInput(
            sex=self.sex,
            age_years=self.age_years,
            height_feet=self.height_feet,
            height_inches=self.height_inches,
            bone_structure=self.bone_structure,
        )


class WeightResultOut(BaseModel):
    """Public view of a WeightResult (raw floats, unrounded)."""
    model_config = ConfigDict(from_attributes=True)

    base_hamwi_weight_lbs: float
    adjusted_frame_weight_lbs: float
    min_healthy_weight_lbs: float
    max_healthy_weight_lbs: float
    bmi_at_min_weight: float
    bmi_at_max_weight: float
    bmi_at_midpoint: float
    bmi_healthy_min_lbs: float
    bmi_healthy_max_lbs: float
    health_status: HealthStatus
    health_status_label: str
    bmi_classification: BmiClassification


class WeightRangeResponse(BaseModel):
    """Calculation outcome plus the usage count when the call was counted."""
    valid: bool
    result: WeightResultOut | None = None
    invalid_field: str | None = None
    invalid_reason: str | None = None
    usage_count: int | None = Field(default=None, ge=0)
