from datetime import date
from typing import Optional

from pydantic import BaseModel

from gradetrack.models.term import Term


class SchoolYearRead(BaseModel):
    id: int
    name: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_active: bool
    grading_term: Term
    is_grading_open: bool

    class Config:
        from_attributes = True
