"""Usage Schemas — persisted counter record and the count endpoints' response.

Invariants:
    - count is a non-negative integer everywhere
    - UsageRecord defaults to {"count": 0} when the field is absent
"""

from pydantic import BaseModel, Field


class UsageRecord(BaseModel):
    """Persisted layout of the JSON counter file."""
    count: int = Field(default=0, ge=0)


class UsageResponse(BaseModel):
    """Body of GET /usage and POST /usage/increment."""
    count: int = Field(ge=0)
