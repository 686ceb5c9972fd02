from typing import Optional
from sqlalchemy.orm import Session

from models.study import StudyCycle as StudyCycleModel, UserStudyConfig as UserStudyConfigModel
from schemas.study import StudyConfigIn

# years above this one are rotation based and have no semester split
LAST_SEMESTER_YEAR = 3


class StudyCycleNotFoundError(ValueError):
    """No study cycle matches the selected year/semester."""
    pass


def resolve_study_cycle(db: Session, selection: StudyConfigIn) -> StudyCycleModel:
    query = db.query(StudyCycleModel).filter(StudyCycleModel.academic_year_id == selection.year)

    if selection.year > LAST_SEMESTER_YEAR:
        # the cycle of the chosen rotation, otherwise any cycle of the year
        cycles = query.order_by(StudyCycleModel.id).all()
        cycle = next((c for c in cycles if selection.rotation and c.rotation == selection.rotation), None)
        cycle = cycle or (cycles[0] if cycles else None)
        if cycle is None:
            raise StudyCycleNotFoundError("No study cycle found for selected year")
        return cycle

    if selection.semester is None:
        raise StudyCycleNotFoundError("Semester is required for years 1-3")

    cycle = query.filter(StudyCycleModel.semester_id == selection.semester).first()
    if cycle is None:
        raise StudyCycleNotFoundError("Invalid academic selection")
    return cycle


def get_user_config(db: Session, user_id: str) -> Optional[UserStudyConfigModel]:
    return db.query(UserStudyConfigModel).filter(UserStudyConfigModel.user_id == user_id).first()


def save_user_config(db: Session, user_id: str, selection: StudyConfigIn) -> UserStudyConfigModel:
    """Resolve the selection and upsert the user's config row."""
    cycle = resolve_study_cycle(db, selection)

    config = get_user_config(db, user_id)
    if config is None:
        config = UserStudyConfigModel(user_id=user_id)
        db.add(config)
    config.study_cycle_id = cycle.id
    config.rotation = selection.rotation
    db.commit()
    db.refresh(config)
    return config
