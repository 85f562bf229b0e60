from sqlalchemy import (
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import relationship

from gradetrack.db.base_class import Base
from gradetrack.models.term import Term


class StudentGrade(Base):
    __tablename__ = "student_grades"

    id = Column(Integer, primary_key=True, index=True)

    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    subject_id = Column(Integer, ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False, index=True)
    school_year_id = Column(Integer, ForeignKey("school_years.id", ondelete="CASCADE"), nullable=False, index=True)
    term = Column(Enum(Term, name="grading_term"), nullable=False)

    # nullable: a cleared grade keeps its row but no longer counts as completed
    grade_scale_id = Column(Integer, ForeignKey("grade_scales.id", ondelete="SET NULL"), nullable=True)
    teacher_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        UniqueConstraint(
            "student_id", "subject_id", "school_year_id", "term",
            name="uq_student_grade_student_subject_year_term",
        ),
    )

    student = relationship("Student", back_populates="grades")
    grade_scale = relationship("GradeScale")
