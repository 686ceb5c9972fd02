import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import require_profile
from models.subjects import Subject as SubjectModel
from schemas.subjects import DifficultyUpdate, Subject
from schemas.users import UserContext

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/subjects", tags=["subjects"])


def load_subjects(db: Session, study_cycle_id: int) -> list[Subject]:
    rows = (
        db.query(SubjectModel)
        .filter(SubjectModel.study_cycle_id == study_cycle_id)
        .order_by(SubjectModel.id)
        .all()
    )
    return [Subject.model_validate(r) for r in rows]


# ✅ [READ] subjects of the user's study cycle
@router.get("/")
def read_subjects(user: UserContext = Depends(require_profile), db: Session = Depends(get_db)):
    subjects = load_subjects(db, user.study_cycle_id)
    return {
        "success": True,
        "data": [s.model_dump() for s in subjects],
        "message": "Subjects of the current study cycle",
    }


# ✅ [UPDATE] difficulty tag, the only editable subject field
@router.patch("/{subject_id}/difficulty")
def update_difficulty(
    subject_id: int,
    body: DifficultyUpdate,
    user: UserContext = Depends(require_profile),
    db: Session = Depends(get_db),
):
    subject = (
        db.query(SubjectModel)
        .filter(SubjectModel.id == subject_id, SubjectModel.study_cycle_id == user.study_cycle_id)
        .first()
    )
    if subject is None:
        return {"success": False, "error": {"code": 404, "message": "Subject not found"}}

    subject.difficulty = body.difficulty
    db.commit()
    db.refresh(subject)
    logger.info("Subject %s difficulty set to %s by %s", subject_id, body.difficulty, user.user_id)
    return {
        "success": True,
        "data": Subject.model_validate(subject).model_dump(),
        "message": "Subject difficulty updated successfully",
    }
