"""Domain Types — enums that replace bare strings across the codebase.

Invariants:
    - All valid input choices and result classifications encoded as Enums
    - str Enums: values are the exact wire strings used by the API and the UI

Design Decisions:
    - str Enum over Literal: one definition shared by core, schemas and config
"""

from enum import Enum


# ─── Calculator Inputs ───────────────────────────────────────────

class Sex(str, Enum):
    """Selects the Hamwi base weight and per-inch increment."""
    MALE = "male"
    FEMALE = "female"


class BoneStructure(str, Enum):
    """Reported body-frame size — drives the ±7% frame adjustment."""
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


# ─── Calculator Outputs ──────────────────────────────────────────

class HealthStatus(str, Enum):
    """How the frame-adjusted range's BMI span relates to 18.5–24.9."""
    WITHIN = "within"
    PARTIALLY_OUTSIDE = "partially_outside"
    FULLY_OUTSIDE = "fully_outside"


class BmiClassification(str, Enum):
    """Standard BMI category of the range midpoint."""
    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"


# ─── Usage Counter ───────────────────────────────────────────────

class CounterPolicy(str, Enum):
    """Consistency policy for read-modify-write on the usage counter."""
    SERIALIZED = "serialized"
    LOSSY = "lossy"


class CounterBackend(str, Enum):
    """Durable storage selected for the usage counter."""
    JSON = "json"
    DATABASE = "database"
