from dataclasses import asdict

from gradetrack.reports.aggregate import Aggregation, CompletionCounter
from gradetrack.schemas.completeness import (
    ClassCompletionRow,
    ClassSubjectCompletionRow,
    CompletionRow,
    MissingDetailRow,
    SubjectCompletionRow,
    TeacherCompletionRow,
)


def completion_percent(completed: int, expected: int) -> float:
    """
    Percentage complete, one decimal place, half rounded away from zero.

    Nothing expected counts as fully complete (100.0). Works on the
    integer per-mille value so 1/3 -> 33.3 and 2/3 -> 66.7 exactly.
    """
    if expected == 0:
        return 100.0
    per_mille, remainder = divmod(completed * 1000, expected)
    if remainder * 2 >= expected:
        per_mille += 1
    return per_mille / 10


def _counts(counter: CompletionCounter) -> dict:
    return {
        "expected": counter.expected,
        "completed": counter.completed,
        "missing": counter.missing,
        "completion_pct": completion_percent(counter.completed, counter.expected),
    }


def summary_row(expected: int, completed: int) -> CompletionRow:
    return CompletionRow(
        expected=expected,
        completed=completed,
        missing=max(0, expected - completed),
        completion_pct=completion_percent(completed, expected),
    )


def finalize(agg: Aggregation) -> dict:
    """Turn accumulators into response rows (missing-by-student excluded)."""
    by_class_subject = []
    for unit in agg.by_class_subject:
        a = unit.assignment
        by_class_subject.append(
            ClassSubjectCompletionRow(
                assignment_id=a.id,
                class_id=a.class_id,
                class_name=unit.class_name,
                subject_id=a.subject_id,
                subject_name=a.subject_name,
                teacher_id=a.teacher_id,
                teacher_name=a.teacher_name,
                **_counts(unit),
            )
        )

    return {
        "summary": summary_row(agg.expected, agg.completed),
        "by_class": [
            ClassCompletionRow(class_id=b.key, class_name=b.label, **_counts(b))
            for b in agg.by_class.values()
        ],
        "by_subject": [
            SubjectCompletionRow(subject_id=b.key, subject_name=b.label, **_counts(b))
            for b in agg.by_subject.values()
        ],
        "by_teacher": [
            TeacherCompletionRow(teacher_id=b.key, teacher_name=b.label, **_counts(b))
            for b in agg.by_teacher.values()
        ],
        "by_class_subject": by_class_subject,
        "missing_details": [
            MissingDetailRow(**asdict(d)) for d in agg.missing_details
        ],
    }
