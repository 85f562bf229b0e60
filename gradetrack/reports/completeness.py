import logging
from typing import Optional

from gradetrack.core.config import STUDENTS_PAGE_DEFAULT, STUDENTS_PAGE_SIZE_DEFAULT
from gradetrack.reports.aggregate import aggregate
from gradetrack.reports.pagination import normalize_page, paginate_missing_students
from gradetrack.reports.rollup import finalize
from gradetrack.reports.roster import RosterSource, load_roster
from gradetrack.schemas.completeness import CompletenessReport, SchoolYearSummary

logger = logging.getLogger(__name__)


def build_completeness_report(
    source: RosterSource,
    school_year_id: Optional[int] = None,
    term: Optional[str] = None,
    include_details: bool = False,
    include_students: bool = False,
    students_page: int = STUDENTS_PAGE_DEFAULT,
    students_page_size: int = STUDENTS_PAGE_SIZE_DEFAULT,
) -> CompletenessReport:
    """
    Expected vs. entered grades for one school year and term.

    Raises SchoolYearNotFound when no year can be resolved. A year with no
    active classes yields an empty report at 100% completion.
    """
    roster = load_roster(source, school_year_id=school_year_id, term=term)
    agg = aggregate(
        roster,
        include_students=include_students,
        include_details=include_details,
    )
    rollups = finalize(agg)

    if include_students:
        rows, total, page, page_size = paginate_missing_students(
            list(agg.missing_by_student.values()),
            students_page,
            students_page_size,
        )
    else:
        rows, total = [], 0
        page = 1
        _, page_size = normalize_page(students_page, students_page_size)

    summary = rollups["summary"]
    logger.info(
        "grade completeness year=%s term=%s assignments=%d expected=%d completed=%d",
        roster.school_year.id,
        roster.term.value,
        len(roster.assignments),
        summary.expected,
        summary.completed,
    )

    return CompletenessReport(
        school_year=SchoolYearSummary(
            id=roster.school_year.id, name=roster.school_year.name
        ),
        term=roster.term,
        missing_by_student=rows,
        missing_students_total=total,
        missing_students_page=page,
        missing_students_page_size=page_size,
        **rollups,
    )
