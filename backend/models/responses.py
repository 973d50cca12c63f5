from datetime import datetime
from typing import Literal

from pydantic import BaseModel

Status = Literal["pass", "warn", "fail"]
LensName = Literal["ats", "keyword", "impact", "metrics", "role"]
AnswerLevel = Literal["good", "avg", "weak"]
Verdict = Literal["Strong Hire", "Hire", "Needs Practice"]


class Profile(BaseModel):
    target_role: str = ""
    interested_technologies: list[str] = []


class CheckItem(BaseModel):
    label: str
    status: Status
    detail: str


class RewriteSuggestion(BaseModel):
    original: str
    rewrite: str
    reason: str


class LensResult(BaseModel):
    score: int = 0  # 0-100
    status: Status = "fail"
    summary: str = ""
    checks: list[CheckItem] = []
    rewrites: list[RewriteSuggestion] = []


class AuditResult(BaseModel):
    is_resume: bool = False
    overall_score: int = 0  # 0 whenever is_resume is False
    lenses: dict[LensName, LensResult] = {}


class AuditHistoryEntry(BaseModel):
    score: int
    role: str
    date: datetime


class AuditResponse(BaseModel):
    audit: AuditResult
    history_entry: AuditHistoryEntry


class AnswerScore(BaseModel):
    level: AnswerLevel
    score: int


class AnswerFeedback(AnswerScore):
    feedback: str


class InterviewQuestionResult(BaseModel):
    question: str
    answer: str
    tech_score: int
    comm_score: int
    overall: int
    word_count: int
    feedback: str


class InterviewSessionResult(BaseModel):
    results: list[InterviewQuestionResult] = []
    avg_tech: int = 0
    avg_comm: int = 0
    avg_overall: int = 0
    verdict: Verdict = "Needs Practice"
    strengths: list[str] = []
    weaknesses: list[str] = []


class InterviewHistoryEntry(BaseModel):
    score: int
    tech_score: int
    comm_score: int
    verdict: Verdict
    role: str
    difficulty: str
    questions_answered: int
    date: datetime


class InterviewReportResponse(BaseModel):
    report: InterviewSessionResult
    history_entry: InterviewHistoryEntry


class TurnResult(BaseModel):
    accepted: bool
    evaluation: AnswerScore
    message: str
    question_index: int  # index of the question to ask next
    next_question: str | None = None
    is_complete: bool = False
    confidence: int


class ActivityItem(BaseModel):
    type: Literal["audit", "interview"]
    label: str
    date: datetime
    score: int
    previous: int
    tag: Literal["BASELINE", "IMPROVED", "NEEDS WORK", "UPDATED"]


class ProgressSummary(BaseModel):
    velocity: int = 0
    total_sessions: int = 0
    recent_activity: list[ActivityItem] = []
