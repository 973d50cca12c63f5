"""Quick per-turn interview answer scorer.

Used after every answer in the mock-interview simulator. The numeric score
does not depend on difficulty; only the qualitative level does, so the same
answer can be "good" for a Friendly interviewer and "avg" for a Strict one.
"""

import logging
import random

from models.responses import AnswerFeedback, AnswerScore
from services.lexicon import (
    ANSWER_EXAMPLE_RE,
    ANSWER_TECH_TERMS,
    ANSWER_TRADEOFF_RE,
    DEFAULT_DIFFICULTY,
    DIGIT_RE,
    FEEDBACK_POOLS,
    LEVEL_THRESHOLDS,
)
from services.text_features import find_terms, word_count

logger = logging.getLogger(__name__)

MIN_ANSWER_CHARS = 5
EMPTY_ANSWER_SCORE = 15
BASE_SCORE = 30
TECH_TERM_POINTS = 5
MAX_TECH_POINTS = 20
NUMBER_BONUS = 8
EXAMPLE_BONUS = 12
TRADEOFF_BONUS = 10
MAX_SCORE = 98


def _length_bonus(words: int) -> int:
    if words >= 40:
        return 20
    if words >= 20:
        return 12
    if words >= 10:
        return 5
    return 0


def raw_answer_score(answer: str) -> int:
    """Difficulty-independent feature score for a non-empty answer."""
    lower = answer.lower()
    score = BASE_SCORE + _length_bonus(word_count(answer))
    score += min(MAX_TECH_POINTS, len(find_terms(lower, ANSWER_TECH_TERMS)) * TECH_TERM_POINTS)
    if DIGIT_RE.search(answer):
        score += NUMBER_BONUS
    if ANSWER_EXAMPLE_RE.search(lower):
        score += EXAMPLE_BONUS
    if ANSWER_TRADEOFF_RE.search(lower):
        score += TRADEOFF_BONUS
    return min(MAX_SCORE, score)


def level_for(score: int, difficulty: str) -> str:
    good, avg = LEVEL_THRESHOLDS.get(difficulty, LEVEL_THRESHOLDS[DEFAULT_DIFFICULTY])
    if score >= good:
        return "good"
    if score >= avg:
        return "avg"
    return "weak"


def score_answer(answer: str | None, difficulty: str) -> AnswerScore:
    if not answer or len(answer.strip()) < MIN_ANSWER_CHARS:
        return AnswerScore(level="weak", score=EMPTY_ANSWER_SCORE)
    score = raw_answer_score(answer)
    return AnswerScore(level=level_for(score, difficulty), score=score)


def feedback_pool(difficulty: str, level: str) -> tuple[str, ...]:
    pools = FEEDBACK_POOLS.get(difficulty)
    if pools is None or level not in pools:
        return FEEDBACK_POOLS[DEFAULT_DIFFICULTY]["avg"]
    return pools[level]


def pick_feedback(difficulty: str, level: str, rng: random.Random | None = None) -> str:
    """Draw one interviewer remark for (difficulty, level).

    The draw is random on purpose; pass a seeded ``random.Random`` to pin it.
    """
    return (rng or random).choice(feedback_pool(difficulty, level))


def score_with_feedback(
    answer: str | None,
    difficulty: str,
    rng: random.Random | None = None,
) -> AnswerFeedback:
    result = score_answer(answer, difficulty)
    logger.debug("Answer scored %d (%s) at %s", result.score, result.level, difficulty)
    return AnswerFeedback(
        level=result.level,
        score=result.score,
        feedback=pick_feedback(difficulty, result.level, rng),
    )
