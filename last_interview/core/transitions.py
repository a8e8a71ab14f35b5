"""Interview mood transitions derived from accumulated points"""
from collections import Counter
from typing import Optional, Sequence

from last_interview.constants import CHAOS_MAX_POINTS, NORMAL_MAX_POINTS, TENSE_MAX_POINTS
from last_interview.schemas.content import AnswerType, InterviewState

# Answer types whose predominance gets the candidate hired in the top bracket.
# The remaining types (aggressive, sociopathic, absurd extreme) get them thrown out.
HIRING_TYPES = frozenset({
    AnswerType.PROFESSIONAL,
    AnswerType.ABSURD_COHERENT,
    AnswerType.ZEN,
})
EXPULSION_TYPES = frozenset({
    AnswerType.AGGRESSIVE,
    AnswerType.SOCIOPATHIC,
    AnswerType.ABSURD_EXTREME,
})


def predominant_answer_type(history: Sequence[AnswerType]) -> Optional[AnswerType]:
    """Most frequent answer type; ties go to the type that occurred most recently.

    Args:
        history: Answer types in the order they were given

    Returns:
        The predominant type, or None for an empty history
    """
    if not history:
        return None
    counts = Counter(history)
    last_seen = {answer_type: i for i, answer_type in enumerate(history)}
    return max(counts, key=lambda t: (counts[t], last_seen[t]))


def state_for_points(total_points: int, predominant: Optional[AnswerType]) -> InterviewState:
    """Map total points (and the predominant type, for the top bracket) to a mood.

    Negative totals fall into the lowest bracket, totals above the nominal
    maximum into the highest one.
    """
    if total_points <= NORMAL_MAX_POINTS:
        return InterviewState.NORMAL
    if total_points <= TENSE_MAX_POINTS:
        return InterviewState.TENSE
    if total_points <= CHAOS_MAX_POINTS:
        return InterviewState.CHAOS

    if predominant in HIRING_TYPES:
        return InterviewState.HIRED_BY_MISTAKE
    if predominant in EXPULSION_TYPES:
        return InterviewState.VIOLENTLY_EXPELLED
    # Top-bracket points without any recorded answer: nothing to disambiguate with
    return InterviewState.CHAOS


def derive_state(state) -> InterviewState:
    """Derive the interview mood of a GameState without modifying it"""
    return state_for_points(state.total_points, predominant_answer_type(state.answer_type_history))
