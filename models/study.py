from sqlalchemy import Column, Integer, String, ForeignKey
from database.db import Base

class AcademicYear(Base):
    __tablename__ = "academic_years"

    id = Column(Integer, primary_key=True, index=True)      # year number (1..6)
    year_name = Column(String(50), nullable=False)          # e.g. "Year I"


class Semester(Base):
    __tablename__ = "semesters"

    id = Column(Integer, primary_key=True, index=True)
    semester_name = Column(String(50), nullable=False)      # e.g. "Semester 1"


class StudyCycle(Base):
    __tablename__ = "study_cycles"  # one program cycle = year (+ semester for years 1-3)

    id = Column(Integer, primary_key=True, index=True)
    academic_year_id = Column(Integer, ForeignKey("academic_years.id"), nullable=False)
    semester_id = Column(Integer, ForeignKey("semesters.id"))   # NULL for rotation based years
    rotation = Column(String(50))                               # clinical rotation label (years 4+)


class UserStudyConfig(Base):
    __tablename__ = "user_study_config"

    user_id = Column(String(36), ForeignKey("users.id"), primary_key=True)
    study_cycle_id = Column(Integer, ForeignKey("study_cycles.id"), nullable=False)
    rotation = Column(String(50))
