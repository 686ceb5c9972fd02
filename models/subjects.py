from sqlalchemy import Column, Integer, Float, String, ForeignKey
from database.db import Base

class Subject(Base):
    __tablename__ = "subjects"

    id = Column(Integer, primary_key=True, index=True)
    subject_name = Column(String(150), nullable=False)
    credits = Column(Float, nullable=False)                             # credit weight (> 0)
    difficulty = Column(String(10), nullable=False, default="medium")   # easy | medium | hard
    study_cycle_id = Column(Integer, ForeignKey("study_cycles.id"), nullable=False, index=True)
