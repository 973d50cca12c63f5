"""Turn-by-turn flow of the mock-interview simulator.

The caller owns the session (question index, confidence, recorded scores)
and passes it in on every turn; nothing is kept here between calls.
"""

import logging
import random
from collections.abc import Sequence

from models.responses import AnswerScore, TurnResult
from services.interview_scorer import MIN_ANSWER_CHARS, pick_feedback, score_answer
from services.question_bank import get_questions
from services.text_features import clamp, round_half_up

logger = logging.getLogger(__name__)

INITIAL_CONFIDENCE = 82
MIN_CONFIDENCE = 55
MAX_CONFIDENCE = 98
CONFIDENCE_DELTA = {"good": 5, "avg": 0, "weak": -7}

NO_ANSWER_MESSAGE = (
    "Critical: No answer detected. Score: 0%. You must provide an answer to "
    "proceed. Try again: click Start Speaking or type your response."
)


def update_confidence(confidence: int, level: str) -> int:
    return clamp(confidence + CONFIDENCE_DELTA.get(level, 0), MIN_CONFIDENCE, MAX_CONFIDENCE)


def session_average(scores: Sequence[AnswerScore]) -> int:
    if not scores:
        return 0
    return round_half_up(sum(s.score for s in scores) / len(scores))


def advance_turn(
    role: str,
    difficulty: str,
    question_index: int,
    answer: str | None,
    confidence: int = INITIAL_CONFIDENCE,
    previous_scores: Sequence[AnswerScore] = (),
    rng: random.Random | None = None,
) -> TurnResult:
    """Score one answer and produce the interviewer's reply.

    An empty or near-empty answer is rejected without advancing: it is
    recorded as a zero score and the same question stays open.
    """
    questions = get_questions(role, difficulty)
    text = (answer or "").strip()

    if question_index >= len(questions):
        # Session already over: nothing left to answer, so nothing is scored
        answered = len(previous_scores)
        return TurnResult(
            accepted=False,
            evaluation=AnswerScore(level="weak", score=0),
            message=(
                f"That concludes our interview. You answered {answered} questions "
                f"with an average score of {session_average(previous_scores)}%."
            ),
            question_index=len(questions),
            is_complete=True,
            confidence=confidence,
        )

    if len(text) < MIN_ANSWER_CHARS:
        logger.info("No answer detected for question %d", question_index)
        return TurnResult(
            accepted=False,
            evaluation=AnswerScore(level="weak", score=0),
            message=NO_ANSWER_MESSAGE,
            question_index=question_index,
            next_question=questions[question_index],
            confidence=confidence,
        )

    evaluation = score_answer(text, difficulty)
    feedback = pick_feedback(difficulty, evaluation.level, rng)
    new_confidence = update_confidence(confidence, evaluation.level)
    next_index = question_index + 1

    if next_index < len(questions):
        return TurnResult(
            accepted=True,
            evaluation=evaluation,
            message=f"{feedback}\n\nQuestion {next_index + 1}:\n{questions[next_index]}",
            question_index=next_index,
            next_question=questions[next_index],
            confidence=new_confidence,
        )

    average = session_average([*previous_scores, evaluation])
    return TurnResult(
        accepted=True,
        evaluation=evaluation,
        message=(
            f"{feedback}\n\nThat concludes our interview. You answered "
            f"{len(questions)} questions with an average score of {average}%. "
            "Thank you for your time."
        ),
        question_index=next_index,
        is_complete=True,
        confidence=new_confidence,
    )
