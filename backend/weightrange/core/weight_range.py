"""Weight Range Calculator — Hamwi reference weight, frame adjustment, BMI comparison.

Invariants:
    - compute_weight_range is PURE: same input, same output, no IO, never raises
      for out-of-domain numbers
    - Out-of-domain input returns InvalidInput, never a partially populated result
    - All arithmetic in float; rounding happens only at presentation
    - totalInches == 60 takes the "at or above" branch; both branches agree there

Design Decisions:
    - Explicit InvalidInput value over an exception: "no result available" is an
      expected outcome while the user is still typing, not a fault
    - Module-level constants are the single source of truth for every factor
"""

from dataclasses import dataclass

from weightrange.core.domain_types import (
    Sex, BoneStructure, HealthStatus, BmiClassification,
)


# ─── Constants ───────────────────────────────────────────────────

METERS_PER_INCH: float = 0.0254
LBS_PER_KG: float = 2.20462

REFERENCE_HEIGHT_INCHES: float = 60.0
HAMWI_BASE_LBS: dict[Sex, float] = {Sex.MALE: 106.0, Sex.FEMALE: 100.0}
HAMWI_LBS_PER_INCH: dict[Sex, float] = {Sex.MALE: 6.0, Sex.FEMALE: 5.0}

FRAME_FACTORS: dict[BoneStructure, float] = {
    BoneStructure.SMALL: 0.93,
    BoneStructure.MEDIUM: 1.0,
    BoneStructure.LARGE: 1.07,
}
RANGE_FRACTION: float = 0.08

BMI_NORMAL_MIN: float = 18.5
BMI_NORMAL_MAX: float = 24.9
BMI_OVERWEIGHT_MAX: float = 29.9

ADULT_AGE_YEARS: float = 18.0

HEALTH_STATUS_LABELS: dict[HealthStatus, str] = {
    HealthStatus.WITHIN: "Within Standard BMI Range",
    HealthStatus.PARTIALLY_OUTSIDE: "Partially Outside Standard BMI Range",
    HealthStatus.FULLY_OUTSIDE: "Outside Standard BMI Range",
}


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class WeightInput:
    """One calculation request, in imperial units."""
    sex: Sex
    age_years: float
    height_feet: float
    height_inches: float
    bone_structure: BoneStructure


@dataclass(frozen=True)
class InvalidInput:
    """No result available — names the first out-of-domain field."""
    field: str
    reason: str


@dataclass(frozen=True)
class WeightResult:
    """Healthy weight range and its BMI comparison. Weights in lbs."""
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
    bmi_classification: BmiClassification

    @property
    def health_status_label(self) -> str:
        return HEALTH_STATUS_LABELS[self.health_status]


# ─── Validation ──────────────────────────────────────────────────

def validate_input(inp: WeightInput) -> InvalidInput | None:
    """Return the first domain violation, or None when computable."""
    if not inp.age_years > 0:
        return InvalidInput("age_years", "age must be greater than 0")
    if not inp.height_feet >= 0:
        return InvalidInput("height_feet", "height in feet must be 0 or more")
    if not 0 <= inp.height_inches <= 11:
        return InvalidInput(
            "height_inches", "height in inches must be between 0 and 11",
        )
    return None


# ─── Formula Steps ───────────────────────────────────────────────

def total_height_inches(height_feet: float, height_inches: float) -> float:
    return height_feet * 12 + height_inches


def hamwi_base_weight(sex: Sex, total_inches: float) -> float:
    """Hamwi reference weight: fixed base at 5 ft, fixed step per inch."""
    base = HAMWI_BASE_LBS[sex]
    per_inch = HAMWI_LBS_PER_INCH[sex]
    if total_inches < REFERENCE_HEIGHT_INCHES:
        return base - (REFERENCE_HEIGHT_INCHES - total_inches) * per_inch
    return base + (total_inches - REFERENCE_HEIGHT_INCHES) * per_inch


def frame_adjusted_weight(base_lbs: float, bone_structure: BoneStructure) -> float:
    return base_lbs * FRAME_FACTORS[bone_structure]


def bmi_from_lbs(weight_lbs: float, height_meters: float) -> float:
    """BMI = kg / m². Height must be non-zero."""
    return (weight_lbs / LBS_PER_KG) / (height_meters * height_meters)


def lbs_at_bmi(bmi: float, height_meters: float) -> float:
    return bmi * (height_meters * height_meters) * LBS_PER_KG


def classify_bmi(bmi: float) -> BmiClassification:
    """Upper bounds are inclusive: 24.9 is Normal, 29.9 is Overweight."""
    if bmi < BMI_NORMAL_MIN:
        return BmiClassification.UNDERWEIGHT
    if bmi <= BMI_NORMAL_MAX:
        return BmiClassification.NORMAL
    if bmi <= BMI_OVERWEIGHT_MAX:
        return BmiClassification.OVERWEIGHT
    return BmiClassification.OBESE


def classify_health_status(bmi_at_min: float, bmi_at_max: float) -> HealthStatus:
    """Compare [bmi_at_min, bmi_at_max] against the standard 18.5–24.9 band."""
    if bmi_at_min > BMI_NORMAL_MAX or bmi_at_max < BMI_NORMAL_MIN:
        return HealthStatus.FULLY_OUTSIDE
    if bmi_at_min < BMI_NORMAL_MIN or bmi_at_max > BMI_NORMAL_MAX:
        return HealthStatus.PARTIALLY_OUTSIDE
    return HealthStatus.WITHIN


# ─── Entry Point ─────────────────────────────────────────────────

def compute_weight_range(inp: WeightInput) -> WeightResult | InvalidInput:
    """Compute the personalized healthy weight range for one input.

    Returns InvalidInput when age <= 0, height_feet < 0, or height_inches is
    outside [0, 11]. A zero total height is also invalid (no BMI exists),
    as is any height short enough that the Hamwi base is not positive
    (below ~42.3 in for men, 40 in or less for women).
    """
    invalid = validate_input(inp)
    if invalid is not None:
        return invalid

    total_inches = total_height_inches(inp.height_feet, inp.height_inches)
    if total_inches == 0:
        return InvalidInput("height_feet", "total height must be greater than 0")
    height_meters = total_inches * METERS_PER_INCH

    base = hamwi_base_weight(inp.sex, total_inches)
    if base <= 0:
        return InvalidInput(
            "height_feet", "height too short for a positive reference weight",
        )
    adjusted = frame_adjusted_weight(base, inp.bone_structure)
    min_lbs = adjusted * (1 - RANGE_FRACTION)
    max_lbs = adjusted * (1 + RANGE_FRACTION)

    bmi_at_min = bmi_from_lbs(min_lbs, height_meters)
    bmi_at_max = bmi_from_lbs(max_lbs, height_meters)
    bmi_at_midpoint = bmi_from_lbs((min_lbs + max_lbs) / 2, height_meters)

    return WeightResult(
        base_hamwi_weight_lbs=base,
        adjusted_frame_weight_lbs=adjusted,
        min_healthy_weight_lbs=min_lbs,
        max_healthy_weight_lbs=max_lbs,
        bmi_at_min_weight=bmi_at_min,
        bmi_at_max_weight=bmi_at_max,
        bmi_at_midpoint=bmi_at_midpoint,
        bmi_healthy_min_lbs=lbs_at_bmi(BMI_NORMAL_MIN, height_meters),
        bmi_healthy_max_lbs=lbs_at_bmi(BMI_NORMAL_MAX, height_meters),
        health_status=classify_health_status(bmi_at_min, bmi_at_max),
        bmi_classification=classify_bmi(bmi_at_midpoint),
    )


def counts_toward_usage(
    inp: WeightInput, outcome: WeightResult | InvalidInput,
) -> bool:
    """Rule: only successful adult calculations increment the usage counter."""
    return isinstance(outcome, WeightResult) and inp.age_years >= ADULT_AGE_YEARS
