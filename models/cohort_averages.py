from sqlalchemy import Column, Integer, Float, String
from database.db import Base

class CohortAverage(Base):
    __tablename__ = "cohort_averages"  # last years' admission averages per year transition

    id = Column(Integer, primary_key=True, index=True)
    grade_type = Column(String(20), nullable=False, index=True)   # budget | scholarship
    year = Column(String(20), nullable=False)                     # e.g. "2023-2024"
    year_I_to_II = Column(Float)
    year_II_to_III = Column(Float)
    year_III_to_IV = Column(Float)
    year_IV_to_V = Column(Float)
    year_V_to_VI = Column(Float)
