import csv
from sqlalchemy.orm import Session
from database.db import SessionLocal
from models.study import AcademicYear, Semester, StudyCycle

YEARS_CSV = "data/academic_years.csv"
SEMESTERS_CSV = "data/semesters.csv"
CYCLES_CSV = "data/study_cycles.csv"

def _rows(path):
    with open(path, newline="", encoding="utf-8-sig") as csvfile:
        return list(csv.DictReader(csvfile))

def migrate_study_cycles():
    db: Session = SessionLocal()

    for row in _rows(YEARS_CSV):
        db.merge(AcademicYear(id=int(row["id"]), year_name=row["year_name"]))
    for row in _rows(SEMESTERS_CSV):
        db.merge(Semester(id=int(row["id"]), semester_name=row["semester_name"]))
    db.flush()

    for row in _rows(CYCLES_CSV):
        db.merge(StudyCycle(
            id=int(row["id"]),
            academic_year_id=int(row["academic_year_id"]),
            semester_id=int(row["semester_id"]) if row.get("semester_id") else None,  # empty for years 4+
            rotation=row.get("rotation") or None,
        ))

    db.commit()
    db.close()
    print("✅ academic years / semesters / study cycles CSV -> DB done")

if __name__ == "__main__":
    migrate_study_cycles()
