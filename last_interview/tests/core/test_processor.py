"""Tests for applying answers to the game state"""
import random

import pytest

from last_interview.core.errors import AnswerAlreadyRecordedError, AnswerProcessingError
from last_interview.core.processor import apply_answer
from last_interview.core.selector import select_next
from last_interview.schemas.content import AnswerType, InterviewState, Question
from last_interview.schemas.state import GameState


def test_points_are_additive(small_content, state):
    q1 = small_content.get_question("q1")
    q2 = small_content.get_question("q2")
    apply_answer(state, q1, q1.answers[1])
    apply_answer(state, q2, q2.answers[1])

    assert state.normal_points == 0
    assert state.chaos_points == 50
    assert state.total_points == 50
    assert state.questions_answered == 2
    assert state.answered_question_ids == {"q1", "q2"}
    assert state.answer_history == ["q1.a2", "q2.a2"]
    assert state.answer_type_history == [AnswerType.AGGRESSIVE, AnswerType.ABSURD_EXTREME]
    assert state.current_state == InterviewState.TENSE


def test_negative_points_are_not_clamped(small_content, state):
    q1 = small_content.get_question("q1")
    apply_answer(state, q1, q1.answers[2])
    assert state.chaos_points == -2
    assert state.current_state == InterviewState.NORMAL


def test_returns_same_state(small_content, state):
    q1 = small_content.get_question("q1")
    assert apply_answer(state, q1, q1.answers[0]) is state


def test_duplicate_answer_rejected_without_change(small_content, state):
    q1 = small_content.get_question("q1")
    apply_answer(state, q1, q1.answers[0])
    before = state.to_dict()

    with pytest.raises(AnswerAlreadyRecordedError):
        apply_answer(state, q1, q1.answers[1])
    assert state.to_dict() == before


def test_foreign_answer_rejected(small_content, state):
    q1 = small_content.get_question("q1")
    q2 = small_content.get_question("q2")
    with pytest.raises(AnswerProcessingError):
        apply_answer(state, q1, q2.answers[0])
    assert state.questions_answered == 0
    assert state.answer_history == []


def test_meta_answers_reset_pacing_counter(state):
    regular = Question.model_validate({
        "id": "r", "text": "Regular",
        "answers": [{"text": "ok", "type": "professional"}],
    })
    meta = Question.model_validate({
        "id": "m", "text": "Are you real?", "category": "meta",
        "answers": [{"text": "no", "type": "zen"}],
    })
    apply_answer(state, regular, regular.answers[0])
    assert state.non_meta_questions_answered == 1
    apply_answer(state, meta, meta.answers[0])
    assert state.non_meta_questions_answered == 0


def test_answer_ids_assigned_in_order(small_content):
    q1 = small_content.get_question("q1")
    assert [a.id for a in q1.answers] == ["q1.a1", "q1.a2", "q1.a3"]


def test_explicit_answer_ids_are_kept():
    question = Question.model_validate({
        "id": "q", "text": "?",
        "answers": [{"id": "custom", "text": "a", "type": "zen"},
                    {"text": "b", "type": "zen"}],
    })
    assert [a.id for a in question.answers] == ["custom", "q.a2"]


@pytest.mark.parametrize("seed", range(10))
def test_points_sum_over_random_playthroughs(default_content, seed):
    rng = random.Random(seed)
    state = GameState()
    chosen = []
    question = select_next(state, default_content.questions)
    while question:
        answer = rng.choice(question.answers)
        chosen.append(answer)
        apply_answer(state, question, answer)
        question = select_next(state, default_content.questions)

    assert state.questions_answered == len(chosen)
    assert state.normal_points == sum(a.normal_points for a in chosen)
    assert state.chaos_points == sum(a.chaos_points for a in chosen)
    assert state.total_points == state.normal_points + state.chaos_points
