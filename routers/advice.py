from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from config.settings import settings
from database.db import get_db
from dependencies.security import require_profile
from dependencies.services import get_advisor, get_grade_store
from routers.subjects import load_subjects
from schemas.advice import AdviceRequest, AdviceResponse
from schemas.users import UserContext
from services.advice_service import get_advice
from services.cohort_service import resolve_target
from services.grade_calculator import build_analysis, compare_to_target, compute_stats, recommendation_candidates
from services.grade_store import GradeStore
from services.llm.base import AdvisorClient

router = APIRouter(prefix="/advice", tags=["AI advice"])


# ✅ [ADVICE] study advice for the subjects still in progress
@router.post("/")
async def post_advice(
    req: AdviceRequest,
    user: UserContext = Depends(require_profile),
    store: GradeStore = Depends(get_grade_store),
    advisor: AdvisorClient = Depends(get_advisor),
    db: Session = Depends(get_db),
):
    subjects = load_subjects(db, user.study_cycle_id)
    entries = store.load(user.user_id)
    stats = compute_stats(subjects, entries, settings.TOTAL_CREDITS)
    target = resolve_target(db, req.target, req.grade_type, req.transition, req.year)

    candidates = recommendation_candidates(subjects, entries)
    # completed subjects first, pending ones in priority order
    analysis = [a for a in build_analysis(subjects, entries) if a.completed] + candidates
    advice = await get_advice(advisor, stats.auto_average, analysis, target)

    result = AdviceResponse(
        advice=advice,
        comparison=compare_to_target(stats.auto_average, target),
        candidates=candidates,
    )
    return {"success": True, "data": result.model_dump(), "message": "Study advice"}
