"""Condition evaluation for question unlocks and endings

Every function here is pure: it reads a GameState and never mutates it.
"""
from typing import Callable, Dict, Iterable, Type

from last_interview.core.transitions import predominant_answer_type
from last_interview.schemas.content import (
    AtLeast,
    AtMost,
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
    Unbounded,
)
from last_interview.schemas.state import GameState

_QUESTION_CHECKS: Dict[Type, Callable[[object, GameState], bool]] = {
    MinNormalPoints: lambda c, s: s.normal_points >= c.value,
    MinChaosPoints: lambda c, s: s.chaos_points >= c.value,
    MaxNormalPoints: lambda c, s: s.normal_points <= c.value,
    MaxChaosPoints: lambda c, s: s.chaos_points <= c.value,
    StateTense: lambda c, s: s.current_state == InterviewState.TENSE,
    StateChaos: lambda c, s: s.current_state == InterviewState.CHAOS,
    SpecificAnswer: lambda c, s: c.related_question_id in s.answered_question_ids,
}

_BOUND_CHECKS: Dict[Type, Callable[[object, int], bool]] = {
    Unbounded: lambda b, v: True,
    AtLeast: lambda b, v: v >= b.value,
    AtMost: lambda b, v: v <= b.value,
}


def _dispatch(table: Dict[Type, Callable], item: object) -> Callable:
    check = table.get(type(item))
    if check is None:
        raise TypeError(f"Unsupported condition variant: {type(item).__name__}")
    return check


def evaluate_condition(condition, state: GameState) -> bool:
    """Evaluate a single question unlock condition against the state"""
    return _dispatch(_QUESTION_CHECKS, condition)(condition, state)


def conditions_hold(conditions: Iterable, state: GameState) -> bool:
    """True when every condition holds; an empty set always holds"""
    return all(evaluate_condition(condition, state) for condition in conditions)


def range_admits(point_range: PointRange, value: int) -> bool:
    """Inclusive check of a value against both ends of a range"""
    return (_dispatch(_BOUND_CHECKS, point_range.lower)(point_range.lower, value)
            and _dispatch(_BOUND_CHECKS, point_range.upper)(point_range.upper, value))


def matches_ending(condition: EndingCondition, state: GameState) -> bool:
    """Check every set field of an ending condition; unset fields never exclude"""
    if not range_admits(condition.total_points, state.total_points):
        return False
    if not range_admits(condition.normal_points, state.normal_points):
        return False
    if not range_admits(condition.chaos_points, state.chaos_points):
        return False

    if condition.required_state is not None and state.current_state != condition.required_state:
        return False

    if condition.predominant_answer_type is not None:
        if predominant_answer_type(state.answer_type_history) != condition.predominant_answer_type:
            return False

    history = set(state.answer_history)
    return all(answer_id in history for answer_id in condition.required_answer_ids)
