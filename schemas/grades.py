"""
schemas/grades.py

- GradeEntry: one user's grade + completion flag for one subject
- AverageStats: derived averages (never persisted)
- TargetComparison: auto average vs an external target
- request bodies for the grade endpoints
"""

from typing import Dict, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

GradeMode = Literal["simulation", "real"]


class GradeEntry(BaseModel):
    grade: float = Field(0.0, ge=0, le=10)   # 0 = not graded
    completed: bool = False

    model_config = ConfigDict(frozen=True, from_attributes=True)


# subject id -> entry; a missing key means "no grade yet"
GradeEntries = Dict[int, GradeEntry]


class AverageStats(BaseModel):
    current_average: float          # completed weighted sum / credits of all subjects
    auto_average: float             # every subject with grade > 0, completed or not
    projected_average: float        # completed weighted sum / program total credits
    completed_credits: float
    remaining_credits: float
    total_possible_credits: float


class TargetComparison(BaseModel):
    auto_average: float
    target: Optional[float] = None
    delta: Optional[float] = None     # auto_average - target
    reached: Optional[bool] = None


class GradeValueIn(BaseModel):
    value: str = Field(..., description='raw field value, "" clears the grade')


class CompletedIn(BaseModel):
    completed: bool
