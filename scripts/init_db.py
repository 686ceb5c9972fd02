from database.db import Base, engine

# register every table on Base.metadata
from models import cohort_averages, grades, study, subjects, users  # noqa: F401

def init_db():
    Base.metadata.create_all(bind=engine)
    print("✅ tables created")

if __name__ == "__main__":
    init_db()
