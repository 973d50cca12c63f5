from typing import Literal

from pydantic import BaseModel, Field, model_validator

from models.responses import AnswerScore, AuditHistoryEntry, InterviewHistoryEntry, Profile
from services.question_bank import QUESTIONS_PER_SESSION

Difficulty = Literal["Friendly", "Standard", "Strict"]


class QuickAuditRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")
    profile: Profile = Profile()


class AnswerRequest(BaseModel):
    answer: str = Field("", max_length=10000, description="Transcribed interview answer")
    difficulty: Difficulty = "Standard"


class TurnRequest(BaseModel):
    role: str = "Frontend Developer"
    difficulty: Difficulty = "Standard"
    question_index: int = Field(0, ge=0, lt=QUESTIONS_PER_SESSION)
    answer: str = Field("", max_length=10000)
    confidence: int = Field(82, ge=0, le=100)
    previous_scores: list[AnswerScore] = []


class EvaluateRequest(BaseModel):
    questions: list[str]
    answers: list[str]
    role: str = ""
    difficulty: Difficulty = "Standard"

    @model_validator(mode="after")
    def _same_length(self) -> "EvaluateRequest":
        if len(self.questions) != len(self.answers):
            raise ValueError("questions and answers must have the same length")
        return self


class ProgressRequest(BaseModel):
    audit_history: list[AuditHistoryEntry] = []
    interview_history: list[InterviewHistoryEntry] = []
