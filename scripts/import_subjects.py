import csv
from sqlalchemy.orm import Session
from database.db import SessionLocal
from models.subjects import Subject as SubjectModel
from services.grade_calculator import default_difficulty

CSV_PATH = "data/subjects.csv"

def migrate_subjects(path: str = CSV_PATH):
    db: Session = SessionLocal()

    with open(path, newline="", encoding="utf-8-sig") as csvfile:
        reader = csv.DictReader(csvfile)
        for row in reader:
            credits = float(row["credits"])
            subject = SubjectModel(
                id=int(row["id"]),
                subject_name=row["subject_name"],
                credits=credits,
                # empty difficulty column -> guess from the credit weight
                difficulty=(row.get("difficulty") or "").strip() or default_difficulty(credits),
                study_cycle_id=int(row["study_cycle_id"]),
            )
            db.merge(subject)

    db.commit()
    db.close()
    print("✅ subjects CSV -> DB done")

if __name__ == "__main__":
    migrate_subjects()
