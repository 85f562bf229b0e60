from typing import Iterable, Optional

from sqlalchemy.orm import Session

from gradetrack.models.school_class import SchoolClass
from gradetrack.models.school_year import SchoolYear
from gradetrack.models.student import Student
from gradetrack.models.student_grade import StudentGrade
from gradetrack.models.subject import Subject
from gradetrack.models.teacher_assignment import TeacherAssignment
from gradetrack.models.term import Term
from gradetrack.models.user import User
from gradetrack.reports.roster import (
    AssignmentRef,
    ClassRoster,
    SchoolYearRef,
    StudentRef,
)


def get_active_school_year(db: Session) -> SchoolYear | None:
    """Active year with the highest sort order."""
    return (
        db.query(SchoolYear)
        .filter(SchoolYear.is_active.is_(True))
        .order_by(SchoolYear.sort_order.desc(), SchoolYear.id.desc())
        .first()
    )


class CompletenessRepository:
    """Read-only SQLAlchemy queries feeding the grade-completeness report."""

    def __init__(self, db: Session):
        self.db = db

    def resolve_school_year(
        self, school_year_id: Optional[int] = None
    ) -> Optional[SchoolYearRef]:
        if school_year_id is not None:
            year = (
                self.db.query(SchoolYear)
                .filter(SchoolYear.id == school_year_id)
                .first()
            )
        else:
            year = get_active_school_year(self.db)

        if not year:
            return None
        return SchoolYearRef(id=year.id, name=year.name, grading_term=year.grading_term)

    def list_active_classes(self, school_year_id: int) -> list[ClassRoster]:
        classes = (
            self.db.query(SchoolClass.id, SchoolClass.name)
            .filter(
                SchoolClass.school_year_id == school_year_id,
                SchoolClass.is_active.is_(True),
            )
            .order_by(SchoolClass.name.asc(), SchoolClass.id.asc())
            .all()
        )
        if not classes:
            return []

        students = (
            self.db.query(
                Student.id,
                Student.first_name,
                Student.last_name,
                Student.class_id,
            )
            .filter(
                Student.class_id.in_([c.id for c in classes]),
                Student.is_active.is_(True),
            )
            .order_by(Student.last_name.asc(), Student.first_name.asc(), Student.id.asc())
            .all()
        )

        by_class: dict[int, list[StudentRef]] = {}
        for s in students:
            by_class.setdefault(s.class_id, []).append(
                StudentRef(
                    id=s.id,
                    name=f"{s.first_name} {s.last_name}",
                    class_id=s.class_id,
                )
            )

        return [
            ClassRoster(id=c.id, name=c.name, students=tuple(by_class.get(c.id, [])))
            for c in classes
        ]

    def list_active_assignments(
        self, school_year_id: int, class_ids: Iterable[int]
    ) -> list[AssignmentRef]:
        class_ids = list(class_ids)
        if not class_ids:
            return []

        rows = (
            self.db.query(
                TeacherAssignment.id.label("assignment_id"),
                TeacherAssignment.class_id,
                TeacherAssignment.subject_id,
                Subject.name.label("subject_name"),
                TeacherAssignment.teacher_id,
                User.first_name,
                User.last_name,
            )
            .join(Subject, Subject.id == TeacherAssignment.subject_id)
            .join(User, User.id == TeacherAssignment.teacher_id)
            .filter(
                TeacherAssignment.school_year_id == school_year_id,
                TeacherAssignment.is_active.is_(True),
                TeacherAssignment.class_id.in_(class_ids),
                Subject.is_active.is_(True),
            )
            # creation order keeps by_class_subject stable between calls
            .order_by(TeacherAssignment.created_at.asc(), TeacherAssignment.id.asc())
            .all()
        )

        return [
            AssignmentRef(
                id=r.assignment_id,
                class_id=r.class_id,
                subject_id=r.subject_id,
                subject_name=r.subject_name,
                teacher_id=r.teacher_id,
                teacher_name=f"{r.first_name} {r.last_name}",
            )
            for r in rows
        ]

    def find_grades(
        self,
        school_year_id: int,
        term: Term,
        student_ids: Iterable[int],
        subject_ids: Iterable[int],
    ) -> set[tuple[int, int]]:
        student_ids = list(student_ids)
        subject_ids = list(subject_ids)
        if not student_ids or not subject_ids:
            return set()

        rows = (
            self.db.query(StudentGrade.student_id, StudentGrade.subject_id)
            .filter(
                StudentGrade.school_year_id == school_year_id,
                StudentGrade.term == term,
                StudentGrade.grade_scale_id.is_not(None),
                StudentGrade.student_id.in_(student_ids),
                StudentGrade.subject_id.in_(subject_ids),
            )
            .all()
        )
        return {(r.student_id, r.subject_id) for r in rows}
