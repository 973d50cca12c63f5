"""History records and the dashboard's progress summary.

The engine never stores anything: callers persist the entries built here
into the user's profile and pass the history back for summarizing.
"""

from collections.abc import Sequence
from datetime import datetime, timezone

from models.responses import (
    ActivityItem,
    AuditHistoryEntry,
    AuditResult,
    InterviewHistoryEntry,
    InterviewSessionResult,
    Profile,
    ProgressSummary,
)
from services.text_features import normalize_role, round_half_up

MAX_RECENT_ACTIVITY = 4


def _stamp(now: datetime | None) -> datetime:
    return now or datetime.now(timezone.utc)


def build_audit_history_entry(
    result: AuditResult,
    profile: Profile | None = None,
    now: datetime | None = None,
) -> AuditHistoryEntry:
    if not result.is_resume:
        raise ValueError("Rejected documents have no score to record")
    return AuditHistoryEntry(
        score=result.overall_score,
        role=normalize_role(profile.target_role if profile else None),
        date=_stamp(now),
    )


def build_interview_history_entry(
    session: InterviewSessionResult,
    role: str,
    difficulty: str,
    questions_answered: int | None = None,
    now: datetime | None = None,
) -> InterviewHistoryEntry:
    return InterviewHistoryEntry(
        score=session.avg_overall,
        tech_score=session.avg_tech,
        comm_score=session.avg_comm,
        verdict=session.verdict,
        role=role,
        difficulty=difficulty,
        questions_answered=len(session.results) if questions_answered is None else questions_answered,
        date=_stamp(now),
    )


def _as_utc(value: datetime) -> datetime:
    """Naive timestamps are taken to be UTC so they sort against aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def summarize_progress(
    audit_history: Sequence[AuditHistoryEntry],
    interview_history: Sequence[InterviewHistoryEntry],
) -> ProgressSummary:
    """Latest-first activity feed plus a single "velocity" score.

    Each history sequence is expected newest first, as it is stored.
    """
    combined = [
        ("interview", f"Mock Interview: {h.role or 'General'}", h.date, h.score)
        for h in interview_history
    ] + [
        ("audit", "Resume Audit", a.date, a.score)
        for a in audit_history
    ]
    combined.sort(key=lambda item: _as_utc(item[2]), reverse=True)
    recent = combined[:MAX_RECENT_ACTIVITY]

    activity: list[ActivityItem] = []
    for i, (kind, label, date, score) in enumerate(recent):
        previous = next((s for k, _, _, s in recent[i + 1:] if k == kind), score)
        tag = "BASELINE"
        if score > previous:
            tag = "IMPROVED"
        elif score < previous:
            tag = "NEEDS WORK"
        elif kind == "audit":
            tag = "UPDATED"
        activity.append(ActivityItem(
            type=kind, label=label, date=date, score=score, previous=previous, tag=tag,
        ))

    last_interview = interview_history[0].score if interview_history else 0
    last_audit = audit_history[0].score if audit_history else 0
    if last_interview and last_audit:
        velocity = round_half_up((last_interview + last_audit) / 2)
    else:
        velocity = last_interview or last_audit

    return ProgressSummary(
        velocity=velocity,
        total_sessions=len(audit_history) + len(interview_history),
        recent_activity=activity,
    )
