import os

TEST_DB_FILE = "test_gradetrack.db"
TEST_DB_URL = f"sqlite:///./{TEST_DB_FILE}"

# point the app's own engine (used by startup init_db) at the test DB too
os.environ.setdefault("DATABASE_URL", TEST_DB_URL)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from gradetrack.core.deps import get_db  # noqa: E402
from gradetrack.db.base import Base  # noqa: E402
from gradetrack.main import app  # noqa: E402
from gradetrack.models.grade_scale import GradeScale  # noqa: E402
from gradetrack.models.school_class import SchoolClass  # noqa: E402
from gradetrack.models.school_year import SchoolYear  # noqa: E402
from gradetrack.models.student import Student  # noqa: E402
from gradetrack.models.student_grade import StudentGrade  # noqa: E402
from gradetrack.models.subject import Subject  # noqa: E402
from gradetrack.models.teacher_assignment import TeacherAssignment  # noqa: E402
from gradetrack.models.term import Term  # noqa: E402
from gradetrack.models.user import User  # noqa: E402

engine = create_engine(
    TEST_DB_URL,
    connect_args={"check_same_thread": False},
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="session", autouse=True)
def setup_test_db():
    """Create a fresh schema once for the whole test session."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    if os.path.exists(TEST_DB_FILE):
        os.remove(TEST_DB_FILE)


@pytest.fixture(autouse=True)
def seed_data():
    """
    Seed a clean minimal dataset for each test:

    year 2025/2026 (active, MIDYEAR) -> class 3A with Anna Nowak and
    Bartek Zielinski -> Math taught by Jan Kowalski. Only Anna has a
    MIDYEAR Math grade; Bartek's only grade is for FINAL.
    """
    db = TestingSessionLocal()
    try:
        # Clear tables (child -> parent)
        db.query(StudentGrade).delete()
        db.query(TeacherAssignment).delete()
        db.query(Student).delete()
        db.query(SchoolClass).delete()
        db.query(Subject).delete()
        db.query(GradeScale).delete()
        db.query(User).delete()
        db.query(SchoolYear).delete()
        db.commit()

        year = SchoolYear(
            name="2025/2026",
            is_active=True,
            sort_order=1,
            grading_term=Term.MIDYEAR,
        )
        teacher = User(
            email="teacher1@example.com",
            first_name="Jan",
            last_name="Kowalski",
            role="TEACHER",
        )
        math = Subject(name="Math", sort_order=1)
        scale = GradeScale(label="DOBRZE OPANOWAL", color_hex="#90EE90", sort_order=3)
        db.add_all([year, teacher, math, scale])
        db.commit()

        class_3a = SchoolClass(name="3A", school_year_id=year.id)
        db.add(class_3a)
        db.commit()

        anna = Student(first_name="Anna", last_name="Nowak", class_id=class_3a.id)
        bartek = Student(first_name="Bartek", last_name="Zielinski", class_id=class_3a.id)
        db.add_all([anna, bartek])
        db.commit()

        assignment = TeacherAssignment(
            teacher_id=teacher.id,
            class_id=class_3a.id,
            subject_id=math.id,
            school_year_id=year.id,
        )
        db.add(assignment)
        db.add_all(
            [
                StudentGrade(
                    student_id=anna.id,
                    subject_id=math.id,
                    school_year_id=year.id,
                    term=Term.MIDYEAR,
                    grade_scale_id=scale.id,
                    teacher_id=teacher.id,
                ),
                StudentGrade(
                    student_id=bartek.id,
                    subject_id=math.id,
                    school_year_id=year.id,
                    term=Term.FINAL,
                    grade_scale_id=scale.id,
                    teacher_id=teacher.id,
                ),
            ]
        )
        db.commit()

        yield {
            "year_id": year.id,
            "teacher_id": teacher.id,
            "subject_id": math.id,
            "scale_id": scale.id,
            "class_id": class_3a.id,
            "anna_id": anna.id,
            "bartek_id": bartek.id,
        }
    finally:
        db.close()


@pytest.fixture()
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client():
    """Test client that uses the test DB session via dependency override."""
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
