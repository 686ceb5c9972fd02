"""
services/cohort_service.py

Historical cohort averages (last years' admission grades), per grade type
(budget / scholarship) and year transition. Used for the dashboard chart and
as a target average for comparisons and advice.
"""

import math
from typing import List, Optional

from sqlalchemy.orm import Session

from models.cohort_averages import CohortAverage as CohortAverageModel
from schemas.cohort import CohortPoint, CohortSeries


def _valid(value) -> bool:
    return value is not None and not math.isnan(value)


def get_series(db: Session, grade_type: str, transition: str) -> CohortSeries:
    rows = (
        db.query(CohortAverageModel)
        .filter(CohortAverageModel.grade_type == grade_type)
        .order_by(CohortAverageModel.year.asc())
        .all()
    )
    points = [CohortPoint(year=r.year, value=getattr(r, transition)) for r in rows]
    return CohortSeries(
        grade_type=grade_type,
        transition=transition,
        points=points,
        min_grade=min_grade(points),
    )


def min_grade(points: List[CohortPoint]) -> int:
    """Floor of the smallest valid value, 0 when there is none."""
    values = [p.value for p in points if _valid(p.value)]
    return math.floor(min(values)) if values else 0


def lookup_target(db: Session, grade_type: str, transition: str, year: Optional[str] = None) -> Optional[float]:
    """
    Cohort value for one year, or for the most recent year that has a value.
    None when nothing matches.
    """
    query = db.query(CohortAverageModel).filter(CohortAverageModel.grade_type == grade_type)
    if year is not None:
        query = query.filter(CohortAverageModel.year == year)

    for row in query.order_by(CohortAverageModel.year.desc()).all():
        value = getattr(row, transition)
        if _valid(value):
            return value
    return None


def resolve_target(
    db: Session,
    target: Optional[float] = None,
    grade_type: Optional[str] = None,
    transition: Optional[str] = None,
    year: Optional[str] = None,
) -> Optional[float]:
    """A custom target wins; otherwise the cohort value when grade type and transition are given."""
    if target is not None:
        return target
    if grade_type and transition:
        return lookup_target(db, grade_type, transition, year)
    return None
