import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# DEV default: local SQLite file. Set DATABASE_URL to point elsewhere.
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE_DIR}/gradetrack.db")

# Missing-by-student pagination
STUDENTS_PAGE_DEFAULT = 1
STUDENTS_PAGE_SIZE_DEFAULT = 50
STUDENTS_PAGE_SIZE_MIN = 10
STUDENTS_PAGE_SIZE_MAX = 200
