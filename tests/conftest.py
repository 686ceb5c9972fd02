import os

# settings are read at import time; point them at sqlite before the app loads
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")
os.environ.setdefault("GEMINI_API_KEY", "")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.db import Base, get_db
from dependencies.security import hash_token
from dependencies.services import get_advisor
from main import app
from models.cohort_averages import CohortAverage
from models.study import AcademicYear, Semester, StudyCycle, UserStudyConfig
from models.subjects import Subject
from models.users import User
from services.llm.base import AdvisorClient, AdvisorError

TOKEN = "student-token"
NEW_USER_TOKEN = "fresh-token"


class FakeAdvisor(AdvisorClient):
    def __init__(self, answer="1. Anatomy: review weekly\n\n2. Physiology: practice tests", fail=False):
        self.answer = answer
        self.fail = fail
        self.prompts = []

    async def generate(self, prompt, **kwargs):
        self.prompts.append(prompt)
        if self.fail:
            raise AdvisorError("service down")
        return self.answer


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    _seed(session)
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


def _seed(db):
    db.add_all([AcademicYear(id=i, year_name=f"Year {i}") for i in range(1, 6)])
    db.add_all([Semester(id=1, semester_name="Semester 1"), Semester(id=2, semester_name="Semester 2")])
    db.flush()
    db.add_all([
        StudyCycle(id=1, academic_year_id=1, semester_id=1),
        StudyCycle(id=2, academic_year_id=1, semester_id=2),
        StudyCycle(id=3, academic_year_id=4, semester_id=None, rotation="A"),
        StudyCycle(id=4, academic_year_id=4, semester_id=None, rotation="B"),
    ])
    db.flush()
    db.add_all([
        Subject(id=1, subject_name="Anatomy", credits=5, difficulty="hard", study_cycle_id=1),
        Subject(id=2, subject_name="Physiology", credits=5, difficulty="medium", study_cycle_id=1),
        Subject(id=3, subject_name="Biochemistry", credits=4, difficulty="easy", study_cycle_id=1),
        Subject(id=10, subject_name="Surgery", credits=10, difficulty="hard", study_cycle_id=3),
    ])
    db.add_all([
        User(id="u-1", email="ana@example.com", token_hash=hash_token(TOKEN)),
        User(id="u-2", email="dan@example.com", token_hash=hash_token(NEW_USER_TOKEN)),
    ])
    db.flush()
    db.add(UserStudyConfig(user_id="u-1", study_cycle_id=1))
    db.add_all([
        CohortAverage(grade_type="budget", year="2021-2022", year_I_to_II=8.9, year_II_to_III=9.1),
        CohortAverage(grade_type="budget", year="2022-2023", year_I_to_II=9.25, year_II_to_III=None),
        CohortAverage(grade_type="scholarship", year="2022-2023", year_I_to_II=9.6),
    ])
    db.commit()


@pytest.fixture
def advisor():
    return FakeAdvisor()


@pytest.fixture
def client(db_session, advisor):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_advisor] = lambda: advisor
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {TOKEN}"}


@pytest.fixture
def new_user_headers():
    return {"Authorization": f"Bearer {NEW_USER_TOKEN}"}
