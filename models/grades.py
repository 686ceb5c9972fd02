from sqlalchemy import Column, Integer, Float, String, Boolean, ForeignKey, UniqueConstraint
from database.db import Base

class Grade(Base):
    __tablename__ = "grades"  # one row per (user, subject)
    __table_args__ = (UniqueConstraint("user_id", "subject_id", name="uq_grades_user_subject"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=False)
    grade = Column(Float, nullable=False, default=0)           # 0..10, 0 = not graded
    completed = Column(Boolean, nullable=False, default=False)
