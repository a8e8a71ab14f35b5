"""Tests for unlock and ending condition evaluation"""
import pytest

from last_interview.core.conditions import (
    conditions_hold,
    evaluate_condition,
    matches_ending,
    range_admits,
)
from last_interview.schemas.content import (
    AnswerType,
    EndingCondition,
    InterviewState,
    MaxChaosPoints,
    MaxNormalPoints,
    MinChaosPoints,
    MinNormalPoints,
    PointRange,
    SpecificAnswer,
    StateChaos,
    StateTense,
)
from last_interview.schemas.state import GameState


@pytest.mark.parametrize("condition,points,expected", [
    (MinNormalPoints(value=10), 9, False),
    (MinNormalPoints(value=10), 10, True),
    (MaxNormalPoints(value=10), 10, True),
    (MaxNormalPoints(value=10), 11, False),
])
def test_normal_point_thresholds(condition, points, expected):
    assert evaluate_condition(condition, GameState(normal_points=points)) is expected


@pytest.mark.parametrize("condition,points,expected", [
    (MinChaosPoints(value=20), 19, False),
    (MinChaosPoints(value=20), 20, True),
    (MaxChaosPoints(value=5), 5, True),
    (MaxChaosPoints(value=5), 6, False),
])
def test_chaos_point_thresholds(condition, points, expected):
    assert evaluate_condition(condition, GameState(chaos_points=points)) is expected


def test_state_conditions():
    tense = GameState(current_state=InterviewState.TENSE)
    chaos = GameState(current_state=InterviewState.CHAOS)
    assert evaluate_condition(StateTense(), tense)
    assert not evaluate_condition(StateTense(), chaos)
    assert evaluate_condition(StateChaos(), chaos)
    assert not evaluate_condition(StateChaos(), tense)


def test_specific_answer_needs_related_question_answered():
    condition = SpecificAnswer(related_question_id="q4")
    assert not evaluate_condition(condition, GameState())
    assert evaluate_condition(condition, GameState(answered_question_ids={"q4"}))


def test_empty_condition_set_holds():
    assert conditions_hold([], GameState())


def test_conditions_are_conjunctive():
    conditions = [MinChaosPoints(value=10), StateTense()]
    assert not conditions_hold(conditions, GameState(chaos_points=15))
    assert conditions_hold(conditions, GameState(chaos_points=15, current_state=InterviewState.TENSE))


def test_unknown_condition_variant_raises():
    with pytest.raises(TypeError):
        evaluate_condition(object(), GameState())


def test_range_admits_inclusive_bounds():
    point_range = PointRange.between(10, 20)
    assert not range_admits(point_range, 9)
    assert range_admits(point_range, 10)
    assert range_admits(point_range, 20)
    assert not range_admits(point_range, 21)
    assert range_admits(PointRange(), -1000)


def test_unconditioned_ending_matches_everything():
    condition = EndingCondition()
    assert condition.is_unconditioned
    assert matches_ending(condition, GameState())
    assert matches_ending(condition, GameState(normal_points=-40, chaos_points=300))


def test_flat_bounds_fold_into_ranges():
    condition = EndingCondition.model_validate({"min_total_points": 70, "max_chaos_points": 40})
    assert condition.total_points == PointRange.between(70, None)
    assert condition.chaos_points == PointRange.between(None, 40)
    assert condition.normal_points.is_unbounded
    assert not condition.is_unconditioned


def test_flat_and_nested_bounds_conflict():
    with pytest.raises(ValueError):
        EndingCondition.model_validate({
            "min_total_points": 70,
            "total_points": {"lower": {"kind": "at_least", "value": 10}},
        })


def test_ending_total_points_range():
    condition = EndingCondition(total_points=PointRange.between(50, 90))
    assert not matches_ending(condition, GameState(normal_points=20, chaos_points=29))
    assert matches_ending(condition, GameState(normal_points=20, chaos_points=30))
    assert not matches_ending(condition, GameState(normal_points=50, chaos_points=41))


def test_ending_required_state():
    condition = EndingCondition(required_state=InterviewState.CHAOS)
    assert not matches_ending(condition, GameState())
    assert matches_ending(condition, GameState(current_state=InterviewState.CHAOS))


def test_ending_predominant_type():
    condition = EndingCondition(predominant_answer_type=AnswerType.ZEN)
    assert not matches_ending(condition, GameState())
    assert matches_ending(condition, GameState(answer_type_history=[AnswerType.ZEN]))
    assert not matches_ending(condition, GameState(
        answer_type_history=[AnswerType.ZEN, AnswerType.AGGRESSIVE, AnswerType.AGGRESSIVE]))


def test_ending_required_answers_all_present():
    condition = EndingCondition(required_answer_ids=("q4.a3", "q12.a2"))
    assert not matches_ending(condition, GameState(answer_history=["q4.a3"]))
    assert matches_ending(condition, GameState(answer_history=["q1.a1", "q4.a3", "q12.a2"]))


def test_matching_does_not_mutate_state():
    state = GameState(normal_points=10, answer_history=["q1.a1"])
    before = state.to_dict()
    matches_ending(EndingCondition(required_state=InterviewState.TENSE), state)
    assert state.to_dict() == before
