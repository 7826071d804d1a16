"""
NetDemo — Counter Request Schema
==================================

What:  Body of POST /incr: {"num": <integer>}.
How:   Strict mode: `num` must be a JSON integer. Strings ("5"), floats
       (5.0), booleans and null are rejected instead of coerced, and the
       caller (IncrementService.decode) falls back to a zero delta.
       Unknown keys are ignored.
"""

from pydantic import BaseModel, Field


class IncrementRequest(BaseModel):
    """Delta to add to the counter. Defaults to 0 when the key is missing."""

    num: int = Field(default=0, description="Amount to add to the counter")

    model_config = {"strict": True}
