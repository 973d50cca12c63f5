"""Tests for history entries and the progress summary."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from models.responses import (
    AuditHistoryEntry,
    AuditResult,
    InterviewHistoryEntry,
    InterviewSessionResult,
    Profile,
)
from services.progress import (
    build_audit_history_entry,
    build_interview_history_entry,
    summarize_progress,
)

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _audit(score: int, date: str) -> AuditHistoryEntry:
    return AuditHistoryEntry(score=score, role="software engineer", date=date)


def _interview(score: int, date: str, role: str = "Backend Developer") -> InterviewHistoryEntry:
    return InterviewHistoryEntry(
        score=score, tech_score=score, comm_score=score, verdict="Hire",
        role=role, difficulty="Standard", questions_answered=5, date=date,
    )


class TestHistoryEntries:
    def test_audit_entry(self):
        result = AuditResult(is_resume=True, overall_score=72)
        entry = build_audit_history_entry(result, Profile(target_role=" Data Scientist "), now=NOW)
        assert entry.score == 72
        assert entry.role == "data scientist"
        assert entry.date == NOW

    def test_audit_entry_default_role(self):
        entry = build_audit_history_entry(AuditResult(is_resume=True, overall_score=50), now=NOW)
        assert entry.role == "software engineer"

    def test_rejected_audit_has_no_entry(self):
        with pytest.raises(ValueError):
            build_audit_history_entry(AuditResult(is_resume=False))

    def test_interview_entry(self):
        session = InterviewSessionResult(avg_tech=70, avg_comm=60, avg_overall=66, verdict="Hire")
        entry = build_interview_history_entry(session, "Backend Developer", "Strict", 3, now=NOW)
        assert entry.score == 66
        assert entry.tech_score == 70
        assert entry.comm_score == 60
        assert entry.verdict == "Hire"
        assert entry.questions_answered == 3

    def test_interview_entry_counts_results_by_default(self):
        entry = build_interview_history_entry(InterviewSessionResult(), "Frontend Developer", "Friendly")
        assert entry.questions_answered == 0
        assert entry.date  # stamped with the current time


class TestSummarizeProgress:
    def test_empty(self):
        summary = summarize_progress([], [])
        assert summary.velocity == 0
        assert summary.total_sessions == 0
        assert summary.recent_activity == []

    def test_velocity_averages_latest_scores(self):
        summary = summarize_progress(
            [_audit(71, "2026-02-01T00:00:00+00:00")],
            [_interview(80, "2026-02-02T00:00:00+00:00")],
        )
        assert summary.velocity == 76  # 75.5

    def test_velocity_with_one_kind(self):
        summary = summarize_progress([_audit(64, "2026-02-01T00:00:00+00:00")], [])
        assert summary.velocity == 64

    def test_activity_tags(self):
        audits = [
            _audit(70, "2026-02-05T00:00:00+00:00"),
            _audit(60, "2026-02-03T00:00:00+00:00"),
            _audit(60, "2026-02-01T00:00:00+00:00"),
        ]
        interviews = [_interview(50, "2026-02-04T00:00:00+00:00")]
        summary = summarize_progress(audits, interviews)
        activity = summary.recent_activity
        assert summary.total_sessions == 4
        assert [a.type for a in activity] == ["audit", "interview", "audit", "audit"]
        assert [a.tag for a in activity] == ["IMPROVED", "BASELINE", "UPDATED", "UPDATED"]
        assert activity[0].previous == 60
        assert activity[1].label == "Mock Interview: Backend Developer"

    def test_regression_tagged_needs_work(self):
        interviews = [
            _interview(40, "2026-02-02T00:00:00+00:00"),
            _interview(65, "2026-02-01T00:00:00+00:00"),
        ]
        activity = summarize_progress([], interviews).recent_activity
        assert activity[0].tag == "NEEDS WORK"
        assert activity[1].tag == "BASELINE"

    def test_only_four_most_recent(self):
        audits = [_audit(50 + i, f"2026-01-{10 + i:02d}T00:00:00+00:00") for i in range(6)]
        summary = summarize_progress(audits, [])
        assert len(summary.recent_activity) == 4
        assert summary.recent_activity[0].date.day == 15
        assert summary.total_sessions == 6

    def test_naive_dates_treated_as_utc(self):
        summary = summarize_progress(
            [_audit(50, "2026-02-01T00:00:00")],
            [_interview(50, "2026-02-02T00:00:00+00:00", role="")],
        )
        assert summary.recent_activity[0].label == "Mock Interview: General"

    def test_zulu_dates_parse(self):
        # JavaScript toISOString() output
        summary = summarize_progress(
            [_audit(55, "2026-02-01T09:30:00.000Z"), _audit(60, "2026-02-02T09:30:00.000Z")],
            [],
        )
        latest = summary.recent_activity[0]
        assert latest.score == 60
        assert latest.date == datetime(2026, 2, 2, 9, 30, tzinfo=timezone.utc)
        assert latest.tag == "IMPROVED"

    def test_mixed_naive_and_aware_dates_sort(self):
        summary = summarize_progress(
            [_audit(40, "2026-02-03T00:00:00")],
            [_interview(50, "2026-02-02T00:00:00Z")],
        )
        assert [a.type for a in summary.recent_activity] == ["audit", "interview"]


def test_malformed_history_date_rejected():
    with pytest.raises(ValidationError):
        _audit(70, "not a date")
