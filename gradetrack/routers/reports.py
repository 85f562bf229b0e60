from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from gradetrack.core.config import STUDENTS_PAGE_DEFAULT, STUDENTS_PAGE_SIZE_DEFAULT
from gradetrack.core.deps import get_db
from gradetrack.reports.completeness import build_completeness_report
from gradetrack.reports.roster import SchoolYearNotFound
from gradetrack.repositories.completeness import CompletenessRepository
from gradetrack.schemas.completeness import CompletenessReport

router = APIRouter()


@router.get(
    "/reports/grade-completeness",
    response_model=CompletenessReport,
    responses={
        404: {"description": "School year not found"},
    },
)
def grade_completeness(
    school_year_id: Optional[int] = None,
    term: Optional[str] = None,
    include_details: bool = False,
    include_students: bool = False,
    students_page: int = STUDENTS_PAGE_DEFAULT,
    students_page_size: int = STUDENTS_PAGE_SIZE_DEFAULT,
    db: Session = Depends(get_db),
):
    # out-of-range paging values are clamped by the report, not rejected
    try:
        return build_completeness_report(
            CompletenessRepository(db),
            school_year_id=school_year_id,
            term=term,
            include_details=include_details,
            include_students=include_students,
            students_page=students_page,
            students_page_size=students_page_size,
        )
    except SchoolYearNotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="School year not found",
        )
