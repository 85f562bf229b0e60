"""initial grade tracking schema

Revision ID: 3f1c2a7d9b10
Revises:
Create Date: 2026-09-28 10:14:32.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '3f1c2a7d9b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# shared by two tables; created once up front (no-op on SQLite)
grading_term = postgresql.ENUM("MIDYEAR", "FINAL", name="grading_term", create_type=False)


def upgrade() -> None:
    """Upgrade schema."""
    grading_term.create(op.get_bind(), checkfirst=True)

    op.create_table(
        "school_years",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(50), nullable=False, unique=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False),
        sa.Column("grading_term", grading_term, nullable=False),
        sa.Column("is_grading_open", sa.Boolean(), nullable=False),
    )
    op.create_index("ix_school_years_id", "school_years", ["id"])

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("role", sa.String(50), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "subjects",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False, unique=True),
        sa.Column("sort_order", sa.Integer(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
    )
    op.create_index("ix_subjects_id", "subjects", ["id"])

    op.create_table(
        "grade_scales",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("label", sa.String(100), nullable=False, unique=True),
        sa.Column("color_hex", sa.String(7), nullable=True),
        sa.Column("sort_order", sa.Integer(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
    )
    op.create_index("ix_grade_scales_id", "grade_scales", ["id"])

    op.create_table(
        "classes",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column(
            "school_year_id",
            sa.Integer(),
            sa.ForeignKey("school_years.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "homeroom_teacher_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.UniqueConstraint("school_year_id", "name", name="uq_classes_year_name"),
    )
    op.create_index("ix_classes_id", "classes", ["id"])
    op.create_index("ix_classes_school_year_id", "classes", ["school_year_id"])

    op.create_table(
        "students",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column(
            "class_id",
            sa.Integer(),
            sa.ForeignKey("classes.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("is_active", sa.Boolean(), nullable=False),
    )
    op.create_index("ix_students_id", "students", ["id"])
    op.create_index("ix_students_class_id", "students", ["class_id"])

    op.create_table(
        "teacher_assignments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("teacher_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("class_id", sa.Integer(), sa.ForeignKey("classes.id", ondelete="CASCADE"), nullable=False),
        sa.Column("subject_id", sa.Integer(), sa.ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False),
        sa.Column("school_year_id", sa.Integer(), sa.ForeignKey("school_years.id", ondelete="CASCADE"), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint(
            "teacher_id",
            "class_id",
            "subject_id",
            "school_year_id",
            name="uq_teacher_assignments_teacher_class_subject_year",
        ),
    )
    op.create_index("ix_teacher_assignments_id", "teacher_assignments", ["id"])
    for col in ("teacher_id", "class_id", "subject_id", "school_year_id"):
        op.create_index(f"ix_teacher_assignments_{col}", "teacher_assignments", [col])

    op.create_table(
        "student_grades",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("student_id", sa.Integer(), sa.ForeignKey("students.id", ondelete="CASCADE"), nullable=False),
        sa.Column("subject_id", sa.Integer(), sa.ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False),
        sa.Column("school_year_id", sa.Integer(), sa.ForeignKey("school_years.id", ondelete="CASCADE"), nullable=False),
        sa.Column("term", grading_term, nullable=False),
        sa.Column("grade_scale_id", sa.Integer(), sa.ForeignKey("grade_scales.id", ondelete="SET NULL"), nullable=True),
        sa.Column("teacher_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint(
            "student_id",
            "subject_id",
            "school_year_id",
            "term",
            name="uq_student_grade_student_subject_year_term",
        ),
    )
    op.create_index("ix_student_grades_id", "student_grades", ["id"])
    for col in ("student_id", "subject_id", "school_year_id"):
        op.create_index(f"ix_student_grades_{col}", "student_grades", [col])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("student_grades")
    op.drop_table("teacher_assignments")
    op.drop_table("students")
    op.drop_table("classes")
    op.drop_table("grade_scales")
    op.drop_table("subjects")
    op.drop_table("users")
    op.drop_table("school_years")
    grading_term.drop(op.get_bind(), checkfirst=True)
