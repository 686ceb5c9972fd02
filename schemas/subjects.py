from pydantic import BaseModel, ConfigDict, Field
from typing import Literal

Difficulty = Literal["easy", "medium", "hard"]

# ✅ output: GET responses and aggregator input
class Subject(BaseModel):
    id: int                                  # subject id
    subject_name: str                        # display name
    credits: float = Field(..., gt=0)        # credit weight
    difficulty: Difficulty = "medium"        # advisory only
    study_cycle_id: int                      # owning study cycle

    model_config = ConfigDict(from_attributes=True)

# ✅ input: PATCH /subjects/{id}/difficulty
class DifficultyUpdate(BaseModel):
    difficulty: Difficulty
