from datetime import date

from sqlalchemy import Boolean, Date, Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gradetrack.db.base_class import Base
from gradetrack.models.term import Term


class SchoolYear(Base):
    __tablename__ = "school_years"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    start_date: Mapped[date | None] = mapped_column(Date)
    end_date: Mapped[date | None] = mapped_column(Date)

    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # term used by reports when the caller does not pick one
    grading_term: Mapped[Term] = mapped_column(
        Enum(Term, name="grading_term"), nullable=False, default=Term.MIDYEAR
    )
    is_grading_open: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    classes = relationship("SchoolClass", back_populates="school_year")
