"""Tests for the mock-interview turn flow and question bank."""

import random

import pytest

from models.responses import AnswerScore
from services.interview_session import (
    INITIAL_CONFIDENCE,
    NO_ANSWER_MESSAGE,
    advance_turn,
    session_average,
    update_confidence,
)
from services.lexicon import DIFFICULTIES, FEEDBACK_POOLS
from services.question_bank import QUESTION_BANK, ROLES, get_questions


GOOD_ANSWER = (
    "For example, in one service the api read from the database on every "
    "request, so I added a cache in front of it and response times dropped by "
    "40 percent for most users during peak traffic hours, which made the whole "
    "product feel faster for everyone involved."
)


class TestQuestionBank:
    def test_every_role_has_five_questions_per_difficulty(self):
        assert ROLES == (
            "Frontend Developer", "Data Scientist", "Backend Developer", "Full Stack Developer",
        )
        for role in ROLES:
            assert set(QUESTION_BANK[role]) == set(DIFFICULTIES)
            for difficulty in DIFFICULTIES:
                assert len(get_questions(role, difficulty)) == 5

    def test_unknown_role_falls_back(self):
        assert get_questions("Astronaut", "Strict") == QUESTION_BANK["Frontend Developer"]["Standard"]

    def test_unknown_difficulty_falls_back(self):
        assert get_questions("Data Scientist", "Hard") == QUESTION_BANK["Frontend Developer"]["Standard"]

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            QUESTION_BANK["Data Scientist"]["Strict"] = ("Replace me",)
        with pytest.raises(TypeError):
            QUESTION_BANK["Astronaut"] = {}


class TestConfidence:
    @pytest.mark.parametrize("start,level,expected", [
        (82, "good", 87),
        (82, "avg", 82),
        (82, "weak", 75),
        (96, "good", 98),
        (58, "weak", 55),
    ])
    def test_update_confidence(self, start, level, expected):
        assert update_confidence(start, level) == expected

    def test_session_average(self):
        scores = [AnswerScore(level="good", score=70), AnswerScore(level="avg", score=45)]
        assert session_average(scores) == 58  # 57.5
        assert session_average([]) == 0


class TestAdvanceTurn:
    def test_silence_does_not_advance(self):
        turn = advance_turn("Backend Developer", "Standard", 2, "  ok ")
        assert turn.accepted is False
        assert turn.evaluation == AnswerScore(level="weak", score=0)
        assert turn.message == NO_ANSWER_MESSAGE
        assert turn.question_index == 2
        assert turn.next_question == get_questions("Backend Developer", "Standard")[2]
        assert turn.confidence == INITIAL_CONFIDENCE

    def test_answer_advances_to_next_question(self):
        questions = get_questions("Frontend Developer", "Friendly")
        turn = advance_turn(
            "Frontend Developer", "Friendly", 0, GOOD_ANSWER, rng=random.Random(3),
        )
        assert turn.accepted
        assert turn.evaluation.level == "good"
        assert turn.question_index == 1
        assert turn.next_question == questions[1]
        assert turn.message.endswith(f"Question 2:\n{questions[1]}")
        assert turn.message.split("\n\n")[0] in FEEDBACK_POOLS["Friendly"]["good"]
        assert turn.confidence == 87
        assert not turn.is_complete

    def test_weak_answer_lowers_confidence(self):
        turn = advance_turn("Data Scientist", "Strict", 0, "I am not sure", confidence=60)
        assert turn.evaluation.level == "weak"
        assert turn.confidence == 55

    def test_last_question_closes_session(self):
        previous = [AnswerScore(level="avg", score=50)] * 4
        turn = advance_turn(
            "Frontend Developer", "Standard", 4, GOOD_ANSWER,
            previous_scores=previous, rng=random.Random(0),
        )
        assert turn.is_complete
        assert turn.next_question is None
        assert turn.question_index == 5
        # (4 * 50 + 85) / 5 = 57
        assert "You answered 5 questions with an average score of 57%." in turn.message

    def test_index_past_last_question_is_not_scored(self):
        previous = [AnswerScore(level="good", score=70), AnswerScore(level="avg", score=50)]
        turn = advance_turn(
            "Backend Developer", "Standard", 9, GOOD_ANSWER,
            confidence=90, previous_scores=previous,
        )
        assert turn.accepted is False
        assert turn.is_complete
        assert turn.evaluation.score == 0
        assert turn.question_index == 5
        assert turn.next_question is None
        assert turn.confidence == 90
        assert "You answered 2 questions with an average score of 60%." in turn.message
