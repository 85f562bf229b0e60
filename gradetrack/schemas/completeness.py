from pydantic import BaseModel, Field

from gradetrack.models.term import Term


class CompletionRow(BaseModel):
    expected: int = 0
    completed: int = 0
    missing: int = 0
    completion_pct: float = 100.0


class ClassCompletionRow(CompletionRow):
    class_id: int
    class_name: str


class SubjectCompletionRow(CompletionRow):
    subject_id: int
    subject_name: str


class TeacherCompletionRow(CompletionRow):
    teacher_id: int
    teacher_name: str


class ClassSubjectCompletionRow(CompletionRow):
    assignment_id: int
    class_id: int
    class_name: str
    subject_id: int
    subject_name: str
    teacher_id: int
    teacher_name: str


class MissingStudentRow(BaseModel):
    student_id: int
    student_name: str
    class_id: int
    class_name: str
    missing_count: int
    subjects: list[str] = Field(default_factory=list)


class MissingDetailRow(BaseModel):
    student_id: int
    student_name: str
    class_id: int
    class_name: str
    subject_id: int
    subject_name: str
    teacher_id: int
    teacher_name: str


class SchoolYearSummary(BaseModel):
    id: int
    name: str


class CompletenessReport(BaseModel):
    school_year: SchoolYearSummary
    term: Term
    summary: CompletionRow

    by_class: list[ClassCompletionRow] = Field(default_factory=list)
    by_subject: list[SubjectCompletionRow] = Field(default_factory=list)
    by_teacher: list[TeacherCompletionRow] = Field(default_factory=list)
    by_class_subject: list[ClassSubjectCompletionRow] = Field(default_factory=list)

    # empty when include_students is false: "not computed", not "nothing missing"
    missing_by_student: list[MissingStudentRow] = Field(default_factory=list)
    missing_students_total: int = 0
    missing_students_page: int = 1
    missing_students_page_size: int

    # empty when include_details is false
    missing_details: list[MissingDetailRow] = Field(default_factory=list)
