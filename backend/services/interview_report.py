"""End-of-session interview evaluator.

Scores each answer on two axes with a richer feature set than the per-turn
scorer in interview_scorer.py:

    technical      25 + 5/term (max 25) + 15 example + 10 tradeoff + 10 number
                   capped at 20 for answers under 8 words, at 98 overall
    communication  30 + length (20 / 10) + 15 structure + 10 example
                   - 5 per filler word, clamped to [10, 98]
    overall        0.6 * technical + 0.4 * communication
"""

import logging
from collections.abc import Sequence

from models.responses import InterviewQuestionResult, InterviewSessionResult
from services.lexicon import (
    DIGIT_RE,
    FILLER_RE,
    REPORT_EXAMPLE_RE,
    REPORT_TECH_TERMS,
    REPORT_TRADEOFF_RE,
    STRUCTURE_RE,
)
from services.text_features import clamp, find_terms, round_half_up, word_count

logger = logging.getLogger(__name__)

TECH_WEIGHT = 0.6
COMM_WEIGHT = 0.4
MAX_NOTES = 5
QUESTION_PREVIEW_CHARS = 50


def _technical_score(terms: int, words: int, example: bool, tradeoff: bool, numbers: bool) -> int:
    score = 25 + min(25, terms * 5)
    if example:
        score += 15
    if tradeoff:
        score += 10
    if numbers:
        score += 10
    if words < 8:
        score = min(score, 20)
    return min(98, score)


def _communication_score(words: int, structured: bool, fillers: int, example: bool) -> int:
    score = 30
    if words >= 30:
        score += 20
    elif words >= 15:
        score += 10
    if structured:
        score += 15
    score -= fillers * 5
    if example:
        score += 10
    return clamp(score, low=10, high=98)


def _feedback(overall: int, question: str) -> str:
    topic = question[:QUESTION_PREVIEW_CHARS]
    if overall >= 75:
        return f'Strong answer on "{topic}...". You showed solid understanding.'
    if overall >= 50:
        return f'Decent answer on "{topic}...". Could use more depth and specifics.'
    return f'Weak answer on "{topic}...". Need much more technical detail and examples.'


def verdict_for(avg_overall: int) -> str:
    if avg_overall >= 80:
        return "Strong Hire"
    if avg_overall >= 60:
        return "Hire"
    return "Needs Practice"


def evaluate_interview(
    questions: Sequence[str],
    answers: Sequence[str],
    role: str = "",
    difficulty: str = "",
) -> InterviewSessionResult:
    """Score a finished session. Missing questions are treated as empty."""
    results: list[InterviewQuestionResult] = []
    strengths: dict[str, None] = {}
    weaknesses: dict[str, None] = {}

    for i, answer in enumerate(answers):
        question = questions[i] if i < len(questions) else ""
        lower = answer.lower()
        words = word_count(answer)
        terms = find_terms(lower, REPORT_TECH_TERMS)
        numbers = bool(DIGIT_RE.search(answer))
        example = bool(REPORT_EXAMPLE_RE.search(lower))
        tradeoff = bool(REPORT_TRADEOFF_RE.search(lower))
        structured = bool(STRUCTURE_RE.search(lower))
        fillers = len(FILLER_RE.findall(answer))

        tech = _technical_score(len(terms), words, example, tradeoff, numbers)
        comm = _communication_score(words, structured, fillers, example)
        overall = round_half_up(tech * TECH_WEIGHT + comm * COMM_WEIGHT)

        if len(terms) >= 3:
            strengths.setdefault("Strong technical vocabulary")
        if example:
            strengths.setdefault("Uses concrete real-world examples")
        if tradeoff:
            strengths.setdefault("Discusses tradeoffs and alternatives")
        if numbers:
            strengths.setdefault("Quantifies impact with numbers")
        if structured:
            strengths.setdefault("Well-structured and organized answers")
        if words >= 40:
            strengths.setdefault("Provides detailed, comprehensive responses")

        if words < 15:
            weaknesses.setdefault("Answers are too short, expand with details")
        if len(terms) < 2:
            weaknesses.setdefault("Low technical depth, use more domain terms")
        if not example:
            weaknesses.setdefault("Missing concrete examples from real projects")
        if not tradeoff:
            weaknesses.setdefault("Does not discuss tradeoffs or limitations")
        if fillers > 2:
            weaknesses.setdefault("Too many filler words, practice clarity")
        if not numbers:
            weaknesses.setdefault("No quantified metrics, add numbers for credibility")

        results.append(InterviewQuestionResult(
            question=question,
            answer=answer,
            tech_score=tech,
            comm_score=comm,
            overall=overall,
            word_count=words,
            feedback=_feedback(overall, question),
        ))

    if results:
        avg_tech = round_half_up(sum(r.tech_score for r in results) / len(results))
        avg_comm = round_half_up(sum(r.comm_score for r in results) / len(results))
        avg_overall = round_half_up(sum(r.overall for r in results) / len(results))
    else:
        avg_tech = avg_comm = avg_overall = 0

    verdict = verdict_for(avg_overall)
    logger.info(
        "Interview evaluated: role=%s difficulty=%s answers=%d overall=%d verdict=%s",
        role, difficulty, len(results), avg_overall, verdict,
    )
    return InterviewSessionResult(
        results=results,
        avg_tech=avg_tech,
        avg_comm=avg_comm,
        avg_overall=avg_overall,
        verdict=verdict,
        strengths=list(strengths)[:MAX_NOTES],
        weaknesses=list(weaknesses)[:MAX_NOTES],
    )
