from pydantic import BaseModel, Field
from typing import List, Optional
from schemas.cohort import GradeType, Transition
from schemas.grades import TargetComparison

class SubjectAnalysis(BaseModel):
    name: str
    credits: float
    difficulty: str
    grade: float
    completed: bool

class AdviceRequest(BaseModel):
    target: Optional[float] = Field(default=None, ge=0, le=10, description="custom target average")
    grade_type: Optional[GradeType] = None          # cohort target when no custom one
    transition: Optional[Transition] = None
    year: Optional[str] = None                      # cohort year, latest when omitted

class AdviceResponse(BaseModel):
    advice: str
    comparison: TargetComparison
    candidates: List[SubjectAnalysis]
