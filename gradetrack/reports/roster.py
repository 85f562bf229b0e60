"""
Immutable inputs for one grade-completeness computation.

The loader asks a data source for the resolved school year, its active
classes (each with its active students), the active teacher assignments
and the set of completed (student, subject) grade keys. Everything it
returns is a frozen snapshot; nothing here touches the ORM directly.
"""
import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Protocol

from gradetrack.models.term import Term

logger = logging.getLogger(__name__)


class SchoolYearNotFound(LookupError):
    """No school year matches the given id, or no active year exists."""


@dataclass(frozen=True)
class SchoolYearRef:
    id: int
    name: str
    grading_term: Term


@dataclass(frozen=True)
class StudentRef:
    id: int
    name: str
    class_id: int


@dataclass(frozen=True)
class ClassRoster:
    id: int
    name: str
    students: tuple[StudentRef, ...] = ()


@dataclass(frozen=True)
class AssignmentRef:
    id: int
    class_id: int
    subject_id: int
    subject_name: str
    teacher_id: int
    teacher_name: str


@dataclass(frozen=True)
class Roster:
    school_year: SchoolYearRef
    term: Term
    classes: tuple[ClassRoster, ...] = ()
    assignments: tuple[AssignmentRef, ...] = ()
    # (student_id, subject_id) pairs that have a grade-scale value
    grade_keys: frozenset = field(default_factory=frozenset)

    def class_by_id(self) -> dict[int, ClassRoster]:
        return {c.id: c for c in self.classes}


class RosterSource(Protocol):
    def resolve_school_year(
        self, school_year_id: Optional[int] = None
    ) -> Optional[SchoolYearRef]: ...

    def list_active_classes(self, school_year_id: int) -> list[ClassRoster]: ...

    def list_active_assignments(
        self, school_year_id: int, class_ids: Iterable[int]
    ) -> list[AssignmentRef]: ...

    def find_grades(
        self,
        school_year_id: int,
        term: Term,
        student_ids: Iterable[int],
        subject_ids: Iterable[int],
    ) -> set[tuple[int, int]]: ...


def resolve_term(value: Optional[str], fallback: Term) -> Term:
    """Caller's term if it is a known value, otherwise the year's default."""
    if isinstance(value, Term):
        return value
    if value in (Term.MIDYEAR.value, Term.FINAL.value):
        return Term(value)
    return Term(fallback)


def load_roster(
    source: RosterSource,
    school_year_id: Optional[int] = None,
    term: Optional[str] = None,
) -> Roster:
    year = source.resolve_school_year(school_year_id)
    if year is None:
        raise SchoolYearNotFound(
            f"School year {school_year_id} not found"
            if school_year_id is not None
            else "No active school year"
        )

    resolved_term = resolve_term(term, year.grading_term)

    classes = source.list_active_classes(year.id)
    if not classes:
        logger.debug("school year %s has no active classes", year.id)
        return Roster(school_year=year, term=resolved_term)

    class_ids = [c.id for c in classes]
    assignments = source.list_active_assignments(year.id, class_ids)

    student_ids = [s.id for c in classes for s in c.students]
    subject_ids = sorted({a.subject_id for a in assignments})

    grade_keys: set[tuple[int, int]] = set()
    if student_ids and subject_ids:
        grade_keys = source.find_grades(year.id, resolved_term, student_ids, subject_ids)

    return Roster(
        school_year=year,
        term=resolved_term,
        classes=tuple(classes),
        assignments=tuple(assignments),
        grade_keys=frozenset(grade_keys),
    )
