from fastapi import Depends, Query, Request
from sqlalchemy.orm import Session

from database.db import get_db
from schemas.grades import GradeMode
from services.grade_store import DatabaseGradeStore, GradeStore
from services.llm.base import AdvisorClient
from services.llm.llm_gemini import GeminiAdvisor


def get_grade_store(
    request: Request,
    mode: GradeMode = Query("simulation", description="simulation: transient what-if grades, real: saved grades"),
    db: Session = Depends(get_db),
) -> GradeStore:
    if mode == "real":
        return DatabaseGradeStore(db)
    return request.app.state.simulation_store


def get_advisor() -> AdvisorClient:
    return GeminiAdvisor()
