from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from gradetrack.core.deps import get_db
from gradetrack.repositories.completeness import get_active_school_year
from gradetrack.schemas.school_year import SchoolYearRead

router = APIRouter()


@router.get(
    "/active",
    response_model=SchoolYearRead,
    responses={
        404: {"description": "No active school year found"},
    },
)
def active_school_year(db: Session = Depends(get_db)):
    year = get_active_school_year(db)
    if not year:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No active school year found",
        )
    return year
