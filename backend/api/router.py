from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import (
    AnswerRequest,
    EvaluateRequest,
    ProgressRequest,
    QuickAuditRequest,
    TurnRequest,
)
from models.responses import (
    AnswerFeedback,
    AuditResponse,
    InterviewReportResponse,
    Profile,
    ProgressSummary,
    TurnResult,
)
from services import pdf_parser
from services.interview_report import evaluate_interview
from services.interview_scorer import score_with_feedback
from services.interview_session import advance_turn
from services.lexicon import LEXICON_VERSION
from services.pipeline.lens_registry import lens_metadata
from services.pipeline.orchestrator import run_audit
from services.progress import (
    build_audit_history_entry,
    build_interview_history_entry,
    summarize_progress,
)
from services.question_bank import get_questions

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

NOT_A_RESUME = (
    "This document does not match a professional resume profile. "
    "Please upload a valid CV or resume."
)
TOO_LITTLE_TEXT = (
    "Could not extract enough text from this file. "
    "Try a different format or paste the text manually."
)


def _audit(resume_text: str, profile: Profile) -> AuditResponse:
    if not pdf_parser.has_enough_text(resume_text, settings.min_resume_chars):
        raise HTTPException(status_code=400, detail=TOO_LITTLE_TEXT)

    result = run_audit(resume_text, profile)
    if not result.is_resume:
        raise HTTPException(status_code=422, detail=NOT_A_RESUME)

    return AuditResponse(
        audit=result,
        history_entry=build_audit_history_entry(result, profile),
    )


@router.get("/health")
async def health():
    return {"status": "ok", "lexicon_version": LEXICON_VERSION}


@router.get("/lenses")
async def lenses():
    return lens_metadata()


@router.post("/audit", response_model=AuditResponse)
@limiter.limit(settings.rate_limit)
async def audit(
    request: Request,
    resume_file: UploadFile = File(...),
    target_role: str = Form(""),
    interested_technologies: str = Form(""),
):
    # Validate file type
    if not resume_file.filename or not resume_file.filename.lower().endswith(".pdf"):
        raise HTTPException(status_code=400, detail="Only PDF files are accepted")

    # Read and validate size
    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    try:
        resume_text = pdf_parser.extract_text(content)
    except Exception:
        raise HTTPException(status_code=400, detail="Could not parse PDF file")

    if len(resume_text) > settings.max_resume_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Resume too long (max {settings.max_resume_chars} chars)",
        )

    profile = Profile(
        target_role=target_role,
        interested_technologies=[t for t in interested_technologies.split(",") if t.strip()],
    )
    return _audit(resume_text, profile)


@router.post("/audit/quick", response_model=AuditResponse)
@limiter.limit(settings.rate_limit)
async def audit_quick(request: Request, body: QuickAuditRequest):
    return _audit(body.resume_text, body.profile)


@router.get("/interview/questions")
async def interview_questions(role: str = "Frontend Developer", difficulty: str = "Standard"):
    return {"questions": list(get_questions(role, difficulty))}


@router.post("/interview/answer", response_model=AnswerFeedback)
async def interview_answer(body: AnswerRequest):
    return score_with_feedback(body.answer, body.difficulty)


@router.post("/interview/turn", response_model=TurnResult)
async def interview_turn(body: TurnRequest):
    return advance_turn(
        role=body.role,
        difficulty=body.difficulty,
        question_index=body.question_index,
        answer=body.answer,
        confidence=body.confidence,
        previous_scores=body.previous_scores,
    )


@router.post("/interview/evaluate", response_model=InterviewReportResponse)
async def interview_evaluate(body: EvaluateRequest):
    report = evaluate_interview(body.questions, body.answers, body.role, body.difficulty)
    return InterviewReportResponse(
        report=report,
        history_entry=build_interview_history_entry(report, body.role, body.difficulty),
    )


@router.post("/progress/summary", response_model=ProgressSummary)
async def progress_summary(body: ProgressRequest):
    return summarize_progress(body.audit_history, body.interview_history)
