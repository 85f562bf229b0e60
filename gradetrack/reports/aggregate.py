from dataclasses import dataclass, field

from gradetrack.reports.roster import AssignmentRef, Roster


@dataclass
class CompletionCounter:
    expected: int = 0
    completed: int = 0
    missing: int = 0

    def add(self, expected: int, completed: int, missing: int) -> None:
        self.expected += expected
        self.completed += completed
        self.missing += missing


@dataclass
class RollupBucket(CompletionCounter):
    """Per-class, per-subject or per-teacher accumulator."""

    key: int = 0
    label: str = ""


@dataclass
class ClassSubjectUnit(CompletionCounter):
    assignment: AssignmentRef | None = None
    class_name: str = ""


@dataclass
class MissingStudent:
    student_id: int
    student_name: str
    class_id: int
    class_name: str
    missing_count: int = 0
    subjects: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class MissingDetail:
    student_id: int
    student_name: str
    class_id: int
    class_name: str
    subject_id: int
    subject_name: str
    teacher_id: int
    teacher_name: str


@dataclass
class Aggregation:
    expected: int = 0
    completed: int = 0
    by_class: dict[int, RollupBucket] = field(default_factory=dict)
    by_subject: dict[int, RollupBucket] = field(default_factory=dict)
    by_teacher: dict[int, RollupBucket] = field(default_factory=dict)
    by_class_subject: list[ClassSubjectUnit] = field(default_factory=list)
    missing_by_student: dict[int, MissingStudent] = field(default_factory=dict)
    missing_details: list[MissingDetail] = field(default_factory=list)


def _bucket(buckets: dict[int, RollupBucket], key: int, label: str) -> RollupBucket:
    bucket = buckets.get(key)
    if bucket is None:
        bucket = buckets[key] = RollupBucket(key=key, label=label)
    return bucket


def aggregate(
    roster: Roster,
    include_students: bool = False,
    include_details: bool = False,
) -> Aggregation:
    """
    Fold every assignment and its class roster into the rollups.

    Each assignment is its own expected/completed unit: two teachers assigned
    the same subject in the same class count that class's roster twice in
    by_class and by_subject, and produce two by_class_subject rows.
    """
    result = Aggregation()
    classes = roster.class_by_id()
    track_missing = include_students or include_details

    for a in roster.assignments:
        class_roster = classes.get(a.class_id)
        students = class_roster.students if class_roster else ()
        class_name = class_roster.name if class_roster else "-"

        completed = 0
        missing_students = []
        for student in students:
            if (student.id, a.subject_id) in roster.grade_keys:
                completed += 1
            elif track_missing:
                missing_students.append(student)

        expected = len(students)
        missing = max(0, expected - completed)

        result.expected += expected
        result.completed += completed

        _bucket(result.by_class, a.class_id, class_name).add(expected, completed, missing)
        _bucket(result.by_subject, a.subject_id, a.subject_name).add(
            expected, completed, missing
        )
        _bucket(result.by_teacher, a.teacher_id, a.teacher_name).add(
            expected, completed, missing
        )

        result.by_class_subject.append(
            ClassSubjectUnit(
                expected=expected,
                completed=completed,
                missing=missing,
                assignment=a,
                class_name=class_name,
            )
        )

        for student in missing_students:
            if include_students:
                entry = result.missing_by_student.get(student.id)
                if entry is None:
                    entry = result.missing_by_student[student.id] = MissingStudent(
                        student_id=student.id,
                        student_name=student.name,
                        class_id=student.class_id,
                        class_name=class_name,
                    )
                entry.missing_count += 1
                entry.subjects.append(a.subject_name)

            if include_details:
                result.missing_details.append(
                    MissingDetail(
                        student_id=student.id,
                        student_name=student.name,
                        class_id=student.class_id,
                        class_name=class_name,
                        subject_id=a.subject_id,
                        subject_name=a.subject_name,
                        teacher_id=a.teacher_id,
                        teacher_name=a.teacher_name,
                    )
                )

    return result
