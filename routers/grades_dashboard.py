from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import require_profile
from schemas.cohort import GradeType, Transition, TRANSITION_LABELS
from schemas.users import UserContext
from services.cohort_service import get_series

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

# ==========================================================
# [Dashboard] last years' cohort averages
# ==========================================================
@router.get("/cohort")
def get_cohort_dashboard(
    grade_type: GradeType = "budget",
    transition: Transition = "year_I_to_II",
    user: UserContext = Depends(require_profile),
    db: Session = Depends(get_db),
):
    series = get_series(db, grade_type, transition)
    if not series.points:
        return {"success": False, "error": {"code": 404, "message": "No cohort data"}}

    return {
        "success": True,
        "data": {
            **series.model_dump(),
            "transition_options": [{"value": k, "label": v} for k, v in TRANSITION_LABELS.items()],
        },
    }
