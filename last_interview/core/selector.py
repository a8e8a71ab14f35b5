"""Picks the next question to ask"""
import logging
from typing import List, Optional, Sequence

from last_interview.constants import DEFAULT_META_INTERVAL
from last_interview.core.conditions import conditions_hold
from last_interview.schemas.content import Question, QuestionCategory
from last_interview.schemas.state import GameState

logger = logging.getLogger(__name__)


def is_eligible(question: Question, state: GameState, meta_interval: int = DEFAULT_META_INTERVAL) -> bool:
    """Whether a question can be asked right now.

    A question is eligible when it has not been answered, all of its unlock
    conditions hold, and the question it contradicts has not been answered.
    With ``meta_interval`` > 0, meta questions additionally wait for that many
    non-meta answers since the last meta question.
    """
    if state.is_answered(question.id):
        return False
    if not conditions_hold(question.unlock_conditions, state):
        return False
    if question.contradicts_question_id and state.is_answered(question.contradicts_question_id):
        return False
    if (meta_interval and question.category == QuestionCategory.META
            and state.non_meta_questions_answered < meta_interval):
        return False
    return True


def eligible_questions(state: GameState,
                       pool: Sequence[Question],
                       meta_interval: int = DEFAULT_META_INTERVAL) -> List[Question]:
    """All eligible questions, base before special before secret.

    The sort is stable, so authored order is kept within each question type.
    """
    eligible = [q for q in pool if is_eligible(q, state, meta_interval)]
    return sorted(eligible, key=lambda q: q.type.rank)


def select_next(state: GameState,
                pool: Sequence[Question],
                meta_interval: int = DEFAULT_META_INTERVAL) -> Optional[Question]:
    """Next question to ask, or None when the interview has run out of questions"""
    candidates = eligible_questions(state, pool, meta_interval)
    if not candidates:
        logger.debug(f"No eligible question left after {state.questions_answered} answers")
        return None
    logger.debug(f"Selected {candidates[0].id} out of {len(candidates)} eligible questions")
    return candidates[0]
