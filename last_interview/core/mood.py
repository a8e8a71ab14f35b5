"""Interviewer mood shown by presentation layers"""
from enum import Enum

from last_interview.constants import MOOD_MARGIN
from last_interview.schemas.content import InterviewState
from last_interview.schemas.state import GameState


class InterviewerMood(Enum):
    """How the interviewer is currently acting toward the candidate"""
    NEUTRAL = "neutral"
    HAPPY = "happy"
    ANGRY = "angry"


def determine_mood(state: GameState) -> InterviewerMood:
    """Derive the interviewer mood from the interview state and points"""
    if state.current_state == InterviewState.NORMAL:
        if state.normal_points > state.chaos_points + MOOD_MARGIN:
            return InterviewerMood.HAPPY
        if state.chaos_points > state.normal_points + MOOD_MARGIN:
            return InterviewerMood.ANGRY
        return InterviewerMood.NEUTRAL
    if state.current_state in (InterviewState.TENSE, InterviewState.CHAOS):
        return InterviewerMood.ANGRY
    # The interview is effectively decided, the interviewer stops reacting
    return InterviewerMood.NEUTRAL
