"""
Mark-entry workflow for a faculty member scoring one team.

The session is an immutable value; every operation takes a session and
returns a new one. Phases:

- ``marking``: scoring the active student's active criterion
- ``student_transition``: the active student is done, the next one is queued
- ``team_dashboard``: all students passed; quick edits, team comment, save

Absent and PAT students are blocked: they cannot be scored and are
skipped instead. Their marks are not submitted.
"""

from dataclasses import dataclass
from dataclasses import field
from dataclasses import replace
from enum import Enum
from typing import Any

DEFAULT_MIN_COMMENT_LENGTH = 10


class MarkEntryError(ValueError):
    """Raised when an operation is not allowed in the session's current state."""


class Phase(str, Enum):
    MARKING = "marking"
    STUDENT_TRANSITION = "student_transition"
    TEAM_DASHBOARD = "team_dashboard"


class Attendance(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"


@dataclass(frozen=True)
class Level:
    score: float
    label: str = ""
    description: str = ""


@dataclass(frozen=True)
class Criterion:
    criterion_id: str
    name: str
    max_marks: float
    levels: tuple[Level, ...]

    @property
    def scores(self) -> tuple[float, ...]:
        return tuple(level.score for level in self.levels)

    @property
    def max_level(self) -> float:
        return max(self.scores)


@dataclass(frozen=True)
class StudentMeta:
    attendance: Attendance = Attendance.PRESENT
    pat: bool = False

    @property
    def blocked(self) -> bool:
        return self.attendance == Attendance.ABSENT or self.pat


@dataclass(frozen=True)
class MarkEntrySession:
    student_ids: tuple[str, ...]
    criteria: tuple[Criterion, ...]
    phase: Phase = Phase.MARKING
    student_index: int = 0
    criterion_index: int = 0
    scores: dict[str, dict[str, float]] = field(default_factory=dict)
    meta: dict[str, StudentMeta] = field(default_factory=dict)
    team_comment: str = ""
    ppt_approved: bool = False
    has_changes: bool = False

    @property
    def active_student(self) -> str:
        return self.student_ids[self.student_index]

    @property
    def active_criterion(self) -> Criterion:
        return self.criteria[self.criterion_index]

    @property
    def is_last_student(self) -> bool:
        return self.student_index == len(self.student_ids) - 1

    def meta_for(self, student_id: str) -> StudentMeta:
        return self.meta.get(student_id, StudentMeta())


def criteria_from_review(review: dict[str, Any]) -> tuple[Criterion, ...]:
    """Build criteria from a marking schema review's ``components``."""
    return tuple(
        Criterion(
            criterion_id=component["component_id"],
            name=component.get("name", component["component_id"]),
            max_marks=float(component["max_marks"]),
            levels=tuple(
                Level(
                    score=float(level["score"]),
                    label=level.get("label", ""),
                    description=level.get("description", ""),
                )
                for level in component["levels"]
            ),
        )
        for component in review.get("components", [])
    )


def start_session(student_ids, criteria) -> MarkEntrySession:
    student_ids = tuple(student_ids)
    criteria = tuple(criteria)
    if not student_ids:
        raise MarkEntryError("A team needs at least one student.")
    if not criteria:
        raise MarkEntryError("The review has no criteria to mark.")
    if len(set(student_ids)) != len(student_ids):
        raise MarkEntryError("Duplicate students in team.")
    return MarkEntrySession(
        student_ids=student_ids,
        criteria=criteria,
        scores={sid: {} for sid in student_ids},
        meta={sid: StudentMeta() for sid in student_ids},
    )


def _require_phase(session: MarkEntrySession, phase: Phase) -> None:
    if session.phase != phase:
        raise MarkEntryError(f"Not allowed in phase '{session.phase.value}'.")


def _require_student(session: MarkEntrySession, student_id: str) -> None:
    if student_id not in session.student_ids:
        raise MarkEntryError(f"Unknown student '{student_id}'.")


def _with_score(session: MarkEntrySession, student_id: str, criterion: Criterion, score: float) -> dict:
    if score not in criterion.scores:
        raise MarkEntryError(f"Score {score} is not a level of '{criterion.name}'.")
    scores = {sid: dict(values) for sid, values in session.scores.items()}
    scores.setdefault(student_id, {})[criterion.criterion_id] = score
    return scores


def _finish_student(session: MarkEntrySession) -> MarkEntrySession:
    if session.is_last_student:
        return replace(session, phase=Phase.TEAM_DASHBOARD)
    return replace(session, phase=Phase.STUDENT_TRANSITION)


def select_score(session: MarkEntrySession, score: float) -> MarkEntrySession:
    """Score the active criterion and move to the next criterion or student."""
    _require_phase(session, Phase.MARKING)
    student_id = session.active_student
    if session.meta_for(student_id).blocked:
        raise MarkEntryError("Absent or PAT students cannot be scored.")

    session = replace(
        session,
        scores=_with_score(session, student_id, session.active_criterion, score),
        has_changes=True,
    )
    if session.criterion_index < len(session.criteria) - 1:
        return replace(session, criterion_index=session.criterion_index + 1)
    return _finish_student(session)


def finish_transition(session: MarkEntrySession) -> MarkEntrySession:
    _require_phase(session, Phase.STUDENT_TRANSITION)
    return replace(
        session,
        phase=Phase.MARKING,
        student_index=session.student_index + 1,
        criterion_index=0,
    )


def skip_student(session: MarkEntrySession) -> MarkEntrySession:
    """Move past a blocked student as if their last criterion were scored."""
    _require_phase(session, Phase.MARKING)
    if not session.meta_for(session.active_student).blocked:
        raise MarkEntryError("Only absent or PAT students can be skipped.")
    return _finish_student(session)


def select_student(session: MarkEntrySession, student_id: str) -> MarkEntrySession:
    """Jump to another student while marking; starts at their first criterion."""
    _require_phase(session, Phase.MARKING)
    _require_student(session, student_id)
    return replace(
        session,
        student_index=session.student_ids.index(student_id),
        criterion_index=0,
    )


def _update_meta(session: MarkEntrySession, student_id: str, meta: StudentMeta) -> MarkEntrySession:
    return replace(session, meta={**session.meta, student_id: meta}, has_changes=True)


def toggle_absent(session: MarkEntrySession, student_id: str) -> MarkEntrySession:
    """Flip attendance; marking a student absent clears PAT."""
    _require_student(session, student_id)
    current = session.meta_for(student_id)
    if current.attendance == Attendance.ABSENT:
        meta = replace(current, attendance=Attendance.PRESENT)
    else:
        meta = StudentMeta(attendance=Attendance.ABSENT, pat=False)
    return _update_meta(session, student_id, meta)


def toggle_pat(session: MarkEntrySession, student_id: str) -> MarkEntrySession:
    """Flip PAT; enabling PAT marks the student present."""
    _require_student(session, student_id)
    current = session.meta_for(student_id)
    if current.pat:
        meta = replace(current, pat=False)
    else:
        meta = StudentMeta(attendance=Attendance.PRESENT, pat=True)
    return _update_meta(session, student_id, meta)


def edit_score(session: MarkEntrySession, student_id: str, criterion_id: str, score: float) -> MarkEntrySession:
    """Quick edit of one score from the team dashboard."""
    _require_phase(session, Phase.TEAM_DASHBOARD)
    _require_student(session, student_id)
    if session.meta_for(student_id).blocked:
        raise MarkEntryError("Absent or PAT students cannot be scored.")
    criterion = next((c for c in session.criteria if c.criterion_id == criterion_id), None)
    if criterion is None:
        raise MarkEntryError(f"Unknown criterion '{criterion_id}'.")
    return replace(
        session,
        scores=_with_score(session, student_id, criterion, score),
        has_changes=True,
    )


def return_to_guided_view(session: MarkEntrySession) -> MarkEntrySession:
    """Leave the dashboard and restart guided marking from the first student."""
    _require_phase(session, Phase.TEAM_DASHBOARD)
    return replace(session, phase=Phase.MARKING, student_index=0, criterion_index=0)


def set_team_comment(session: MarkEntrySession, comment: str) -> MarkEntrySession:
    return replace(session, team_comment=comment, has_changes=True)


def set_ppt_approved(session: MarkEntrySession, approved: bool) -> MarkEntrySession:
    return replace(session, ppt_approved=approved, has_changes=True)


def is_team_comment_valid(comment: str, min_length: int = DEFAULT_MIN_COMMENT_LENGTH) -> bool:
    return len(comment.strip()) >= min_length


def can_save(session: MarkEntrySession, min_length: int = DEFAULT_MIN_COMMENT_LENGTH) -> bool:
    return session.phase == Phase.TEAM_DASHBOARD and is_team_comment_valid(session.team_comment, min_length)


def build_submission(session: MarkEntrySession, min_length: int = DEFAULT_MIN_COMMENT_LENGTH) -> dict[str, Any]:
    """
    Payload for the team mark submission endpoint.

    ``marks`` maps student id to criterion scores, ``meta`` maps student id
    to ``{attendance, pat}``. Blocked students are sent without scores,
    even if they were scored before being marked absent or PAT.
    """
    if not can_save(session, min_length):
        raise MarkEntryError(f"Team comments are required (min {min_length} chars).")
    return {
        "marks": {
            sid: {} if session.meta_for(sid).blocked else dict(session.scores.get(sid, {}))
            for sid in session.student_ids
        },
        "meta": {
            sid: {
                "attendance": session.meta_for(sid).attendance.value,
                "pat": session.meta_for(sid).pat,
            }
            for sid in session.student_ids
        },
        "teamComment": session.team_comment.strip(),
        "pptApproved": session.ppt_approved,
    }


def mark_saved(session: MarkEntrySession) -> MarkEntrySession:
    return replace(session, has_changes=False)


def request_close(session: MarkEntrySession, confirm_discard: bool = False) -> bool:
    """Whether the session may close; unsaved changes need confirmation."""
    return not session.has_changes or confirm_discard


def student_total(session: MarkEntrySession, student_id: str) -> float:
    """Sum of each score scaled from its level range to the criterion's max marks."""
    _require_student(session, student_id)
    scores = session.scores.get(student_id, {})
    total = 0.0
    for criterion in session.criteria:
        score = scores.get(criterion.criterion_id)
        if score is None or not criterion.max_level:
            continue
        total += score / criterion.max_level * criterion.max_marks
    return round(total, 1)
