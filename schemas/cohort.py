from pydantic import BaseModel
from typing import List, Literal, Optional

GradeType = Literal["budget", "scholarship"]
Transition = Literal["year_I_to_II", "year_II_to_III", "year_III_to_IV", "year_IV_to_V", "year_V_to_VI"]

TRANSITION_LABELS = {
    "year_I_to_II": "Year I to II",
    "year_II_to_III": "Year II to III",
    "year_III_to_IV": "Year III to IV",
    "year_IV_to_V": "Year IV to V",
    "year_V_to_VI": "Year V to VI",
}

class CohortPoint(BaseModel):
    year: str
    value: Optional[float] = None

class CohortSeries(BaseModel):
    grade_type: GradeType
    transition: Transition
    points: List[CohortPoint]
    min_grade: int            # y axis floor for the chart
