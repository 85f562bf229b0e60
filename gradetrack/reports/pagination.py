from gradetrack.core.config import (
    STUDENTS_PAGE_SIZE_MAX,
    STUDENTS_PAGE_SIZE_MIN,
)
from gradetrack.reports.aggregate import MissingStudent
from gradetrack.schemas.completeness import MissingStudentRow


def normalize_page(page: int, page_size: int) -> tuple[int, int]:
    """Clamp page to >= 1 and page_size into the allowed window."""
    page = max(1, page)
    page_size = min(STUDENTS_PAGE_SIZE_MAX, max(STUDENTS_PAGE_SIZE_MIN, page_size))
    return page, page_size


def sort_missing_students(entries) -> list[MissingStudentRow]:
    """
    Most missing grades first, then by student name; student id breaks
    remaining ties so the order is total. Subjects are sorted per entry.
    """
    rows = [
        MissingStudentRow(
            student_id=e.student_id,
            student_name=e.student_name,
            class_id=e.class_id,
            class_name=e.class_name,
            missing_count=e.missing_count,
            subjects=sorted(e.subjects),
        )
        for e in entries
    ]
    rows.sort(key=lambda r: (-r.missing_count, r.student_name, r.student_id))
    return rows


def paginate_missing_students(
    entries: list[MissingStudent],
    page: int,
    page_size: int,
) -> tuple[list[MissingStudentRow], int, int, int]:
    """
    Sort the full collection, then slice one page out of it.

    Returns (rows, total, page, page_size). total always counts the whole
    collection; a page past the end is empty.
    """
    page, page_size = normalize_page(page, page_size)
    ordered = sort_missing_students(entries)
    total = len(ordered)

    start = min((page - 1) * page_size, total)
    end = min(page * page_size, total)
    return ordered[start:end], total, page, page_size
