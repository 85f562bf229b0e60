from gradetrack.db.base_class import Base  # noqa: F401

# import models so SQLAlchemy registers them on Base.metadata
from gradetrack.models import (  # noqa: F401
    grade_scale,
    school_class,
    school_year,
    student,
    student_grade,
    subject,
    teacher_assignment,
    user,
)
