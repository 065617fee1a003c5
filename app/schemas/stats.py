from pydantic import BaseModel, Field, StrictInt, field_validator
from typing import Annotated, Dict, Optional

# Counts are 64-bit signed integers on the wire
Count = Annotated[StrictInt, Field(ge=-(2 ** 63), le=2 ** 63 - 1)]

class RatingsEvent(BaseModel):
    ratings: Dict[str, Count] = Field(default_factory=dict)

    @field_validator("ratings", mode="before")
    @classmethod
    def null_ratings_as_empty(cls, value: Optional[Dict[str, int]]):
        return {} if value is None else value

class StatsResponse(BaseModel):
    avg: float
    totalCount: int
