from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class AcademicYear(BaseModel):
    id: int
    year_name: str

    model_config = ConfigDict(from_attributes=True)

class Semester(BaseModel):
    id: int
    semester_name: str

    model_config = ConfigDict(from_attributes=True)

class StudyCycle(BaseModel):
    id: int
    academic_year_id: int
    semester_id: Optional[int] = None
    rotation: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

# ✅ input: PUT /study-config
class StudyConfigIn(BaseModel):
    year: int = Field(..., ge=1, description="academic year id")
    semester: Optional[int] = Field(default=None, ge=1, description="required for years 1-3")
    rotation: Optional[str] = None

# ✅ output
class StudyConfig(BaseModel):
    user_id: str
    study_cycle_id: int
    rotation: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
