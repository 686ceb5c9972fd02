from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from config.settings import settings
from database.db import get_db
from dependencies.security import require_profile
from dependencies.services import get_grade_store
from routers.subjects import load_subjects
from schemas.cohort import GradeType, Transition
from schemas.grades import CompletedIn, GradeEntries, GradeValueIn
from schemas.users import UserContext
from services.cohort_service import resolve_target
from services.grade_calculator import compare_to_target, compute_stats, set_completed, set_grade
from services.grade_store import GradeStore, SimulationGradeStore

router = APIRouter(prefix="/grades", tags=["grades"])


def _payload(subjects, entries: GradeEntries) -> dict:
    known = {s.id for s in subjects}
    return {
        "entries": {sid: e.model_dump() for sid, e in entries.items() if sid in known},
        "stats": compute_stats(subjects, entries, settings.TOTAL_CREDITS).model_dump(),
    }


# ==========================================================
# [READ] entries + averages
# ==========================================================

# ✅ [READ] current entries and stats of the user's cycle
@router.get("/")
def read_grades(
    user: UserContext = Depends(require_profile),
    store: GradeStore = Depends(get_grade_store),
    db: Session = Depends(get_db),
):
    subjects = load_subjects(db, user.study_cycle_id)
    entries = store.load(user.user_id)
    return {"success": True, "data": _payload(subjects, entries), "message": "Grades and averages"}


# ✅ [COMPARE] auto average vs custom or cohort target
@router.get("/compare")
def compare_grades(
    target: Optional[float] = Query(default=None, ge=0, le=10),
    grade_type: Optional[GradeType] = None,
    transition: Optional[Transition] = None,
    year: Optional[str] = None,
    user: UserContext = Depends(require_profile),
    store: GradeStore = Depends(get_grade_store),
    db: Session = Depends(get_db),
):
    subjects = load_subjects(db, user.study_cycle_id)
    stats = compute_stats(subjects, store.load(user.user_id), settings.TOTAL_CREDITS)
    resolved = resolve_target(db, target, grade_type, transition, year)
    return {
        "success": True,
        "data": compare_to_target(stats.auto_average, resolved).model_dump(),
        "message": "Target comparison",
    }


# ==========================================================
# [UPDATE] grade value / completion flag
# ==========================================================

# ✅ [UPDATE] grade field value ("" clears, invalid input is ignored)
@router.put("/{subject_id}")
def update_grade(
    subject_id: int,
    body: GradeValueIn,
    user: UserContext = Depends(require_profile),
    store: GradeStore = Depends(get_grade_store),
    db: Session = Depends(get_db),
):
    subjects = load_subjects(db, user.study_cycle_id)
    if subject_id not in {s.id for s in subjects}:
        return {"success": False, "error": {"code": 404, "message": "Subject not found"}}

    entries = store.load(user.user_id)
    updated = set_grade(entries, subject_id, body.value)
    applied = updated is not entries
    if applied:
        store.save(user.user_id, subject_id, updated[subject_id])

    return {
        "success": True,
        "data": {"applied": applied, **_payload(subjects, updated)},
        "message": "Grade saved" if applied else "Invalid grade ignored",
    }


# ✅ [UPDATE] completed checkbox
@router.put("/{subject_id}/completed")
def update_completed(
    subject_id: int,
    body: CompletedIn,
    user: UserContext = Depends(require_profile),
    store: GradeStore = Depends(get_grade_store),
    db: Session = Depends(get_db),
):
    subjects = load_subjects(db, user.study_cycle_id)
    if subject_id not in {s.id for s in subjects}:
        return {"success": False, "error": {"code": 404, "message": "Subject not found"}}

    updated = set_completed(store.load(user.user_id), subject_id, body.completed)
    store.save(user.user_id, subject_id, updated[subject_id])
    return {
        "success": True,
        "data": {"applied": True, **_payload(subjects, updated)},
        "message": "Grade saved",
    }


# ✅ [DELETE] drop all simulated grades of the user
@router.delete("/")
def reset_simulation(
    user: UserContext = Depends(require_profile),
    store: GradeStore = Depends(get_grade_store),
):
    if not isinstance(store, SimulationGradeStore):
        return {"success": False, "error": {"code": 400, "message": "Only simulated grades can be reset"}}
    store.reset(user.user_id)
    return {"success": True, "data": {"user_id": user.user_id}, "message": "Simulated grades cleared"}
