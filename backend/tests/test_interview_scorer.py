"""Tests for the per-turn interview answer scorer."""

import random

import pytest

from services.interview_scorer import (
    feedback_pool,
    level_for,
    pick_feedback,
    raw_answer_score,
    score_answer,
    score_with_feedback,
)
from services.lexicon import DIFFICULTIES, FEEDBACK_POOLS


# 51 words, "deploy" + "database", one digit, no example or tradeoff phrase:
# 30 + 20 + 10 + 8 = 68
MID_ANSWER = (
    "I deploy the app to 2 regions and keep the database small so pages load "
    "quickly for people who visit during the day and at night when traffic is "
    "low, and the team reviews each change carefully before release to make "
    "sure nothing breaks in the live environment for any customer."
)

CACHE_ANSWER = (
    "For example, in one service the api read from the database on every "
    "request, so I added a cache in front of it and response times dropped by "
    "40 percent for most users during peak traffic hours, which made the whole "
    "product feel faster and cut the load on the primary instance considerably "
    "while keeping the data fresh enough for the dashboards that the support "
    "team relied on each morning."
)


class TestScoreAnswer:
    @pytest.mark.parametrize("answer", ["", None, "   ", "  hi  ", "abcd"])
    def test_guard_for_missing_answer(self, answer):
        result = score_answer(answer, "Standard")
        assert result.level == "weak"
        assert result.score == 15

    def test_cache_answer_friendly(self):
        result = score_answer(CACHE_ANSWER, "Friendly")
        assert result.score >= 85
        assert result.level == "good"

    def test_mid_answer_score(self):
        assert raw_answer_score(MID_ANSWER) == 68

    def test_difficulty_changes_level_not_score(self):
        friendly = score_answer(MID_ANSWER, "Friendly")
        standard = score_answer(MID_ANSWER, "Standard")
        strict = score_answer(MID_ANSWER, "Strict")
        assert friendly.score == standard.score == strict.score == 68
        assert friendly.level == "good"
        assert standard.level == "good"
        assert strict.level == "avg"

    def test_stricter_never_more_favorable(self):
        rank = {"weak": 0, "avg": 1, "good": 2}
        for score in range(0, 99):
            levels = [rank[level_for(score, d)] for d in DIFFICULTIES]
            assert levels == sorted(levels, reverse=True), score

    def test_short_answer_gets_no_length_bonus(self):
        result = score_answer("hello there", "Standard")
        assert result.score == 30
        assert result.level == "weak"

    def test_tech_terms_capped_at_four(self):
        # six terms, still 20 points
        assert raw_answer_score("api database cache server client test") == 50

    def test_score_capped_at_98(self):
        answer = (
            MID_ANSWER
            + " For example the api uses a cache and a server, however it is slower."
        )
        assert raw_answer_score(answer) == 98

    def test_unknown_difficulty_uses_standard_thresholds(self):
        assert level_for(60, "Nightmare") == level_for(60, "Standard") == "avg"


class TestFeedback:
    @pytest.mark.parametrize("difficulty", DIFFICULTIES)
    @pytest.mark.parametrize("level", ["good", "avg", "weak"])
    def test_pick_is_from_pool(self, difficulty, level):
        pool = FEEDBACK_POOLS[difficulty][level]
        assert len(pool) == 3
        for seed in range(10):
            assert pick_feedback(difficulty, level, random.Random(seed)) in pool

    def test_seeded_draw_is_repeatable(self):
        first = pick_feedback("Strict", "weak", random.Random(7))
        second = pick_feedback("Strict", "weak", random.Random(7))
        assert first == second

    def test_unknown_difficulty_falls_back(self):
        assert feedback_pool("Nightmare", "good") == FEEDBACK_POOLS["Standard"]["avg"]

    def test_score_with_feedback(self):
        result = score_with_feedback(CACHE_ANSWER, "Friendly", random.Random(0))
        assert result.level == "good"
        assert result.feedback in FEEDBACK_POOLS["Friendly"]["good"]

    def test_empty_answer_feedback_is_weak(self):
        result = score_with_feedback("", "Strict", random.Random(0))
        assert result.score == 15
        assert result.feedback in FEEDBACK_POOLS["Strict"]["weak"]
