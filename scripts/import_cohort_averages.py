import csv
import sys
from sqlalchemy.orm import Session
from database.db import SessionLocal
from models.cohort_averages import CohortAverage

# one file per grade type, same columns as the old budget / scholarship tables
CSV_PATHS = {
    "budget": "data/last_years_budget_grades.csv",
    "scholarship": "data/last_years_scholarship_grades.csv",
}
TRANSITIONS = ["year_I_to_II", "year_II_to_III", "year_III_to_IV", "year_IV_to_V", "year_V_to_VI"]

def _value(raw):
    raw = (raw or "").strip()
    return float(raw) if raw else None

def migrate_cohort_averages(grade_type: str):
    db: Session = SessionLocal()

    db.query(CohortAverage).filter(CohortAverage.grade_type == grade_type).delete()
    with open(CSV_PATHS[grade_type], newline="", encoding="utf-8-sig") as csvfile:
        reader = csv.DictReader(csvfile)
        for row in reader:
            db.add(CohortAverage(
                grade_type=grade_type,
                year=row["year"],
                **{t: _value(row.get(t)) for t in TRANSITIONS},
            ))

    db.commit()
    db.close()
    print(f"✅ {grade_type} cohort averages CSV -> DB done")

if __name__ == "__main__":
    for gt in sys.argv[1:] or CSV_PATHS.keys():
        migrate_cohort_averages(gt)
