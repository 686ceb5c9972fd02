from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import get_user_context
from models.study import AcademicYear as AcademicYearModel, Semester as SemesterModel, StudyCycle as StudyCycleModel
from schemas.study import AcademicYear, Semester, StudyConfig, StudyConfigIn, StudyCycle
from schemas.users import UserContext
from services.study_config import StudyCycleNotFoundError, get_user_config, save_user_config

router = APIRouter(prefix="/study-config", tags=["study config"])


# ✅ [READ] form options: years, semesters, cycles
@router.get("/options")
def read_options(db: Session = Depends(get_db)):
    years = db.query(AcademicYearModel).order_by(AcademicYearModel.id).all()
    semesters = db.query(SemesterModel).order_by(SemesterModel.id).all()
    cycles = db.query(StudyCycleModel).order_by(StudyCycleModel.id).all()
    return {
        "success": True,
        "data": {
            "academic_years": [AcademicYear.model_validate(y).model_dump() for y in years],
            "semesters": [Semester.model_validate(s).model_dump() for s in semesters],
            "study_cycles": [StudyCycle.model_validate(c).model_dump() for c in cycles],
        },
        "message": "Study config options",
    }


# ✅ [READ] current user's config
@router.get("/")
def read_config(user: UserContext = Depends(get_user_context), db: Session = Depends(get_db)):
    config = get_user_config(db, user.user_id)
    if config is None:
        return {"success": False, "error": {"code": 404, "message": "Study profile not completed"}}
    return {"success": True, "data": StudyConfig.model_validate(config).model_dump(), "message": "Study config"}


# ✅ [UPDATE] pick year / semester / rotation
@router.put("/")
def update_config(selection: StudyConfigIn, user: UserContext = Depends(get_user_context), db: Session = Depends(get_db)):
    try:
        config = save_user_config(db, user.user_id, selection)
    except StudyCycleNotFoundError as e:
        return {"success": False, "error": {"code": 400, "message": str(e)}}
    return {
        "success": True,
        "data": StudyConfig.model_validate(config).model_dump(),
        "message": "Study config saved",
    }
