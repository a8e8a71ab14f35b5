"""Applies a chosen answer to the game state"""
import logging

from last_interview.core.errors import AnswerAlreadyRecordedError, AnswerProcessingError
from last_interview.core.transitions import derive_state
from last_interview.schemas.content import Answer, Question, QuestionCategory
from last_interview.schemas.state import GameState

logger = logging.getLogger(__name__)


def apply_answer(state: GameState, question: Question, answer: Answer) -> GameState:
    """Score an answer and bring the interview mood up to date.

    Points are added as-is, without clamping. The state is left untouched when
    the answer is rejected.

    Args:
        state: Playthrough state to update
        question: Question being answered
        answer: One of ``question.answers``

    Returns:
        The same GameState instance, updated

    Raises:
        AnswerAlreadyRecordedError: If the question was already answered
        AnswerProcessingError: If the answer does not belong to the question
    """
    if question.id in state.answered_question_ids:
        logger.error(f"Question {question.id} was already answered, ignoring answer {answer.id}")
        raise AnswerAlreadyRecordedError(f"Question already answered: {question.id}")
    if answer not in question.answers:
        logger.error(f"Answer {answer.id} does not belong to question {question.id}")
        raise AnswerProcessingError(f"Answer {answer.id} is not an answer to {question.id}")

    previous = state.current_state
    state.normal_points += answer.normal_points
    state.chaos_points += answer.chaos_points
    state.questions_answered += 1
    state.answered_question_ids.add(question.id)
    state.answer_history.append(answer.id)
    state.answer_type_history.append(answer.type)

    if question.category == QuestionCategory.META:
        state.non_meta_questions_answered = 0
    else:
        state.non_meta_questions_answered += 1

    state.current_state = derive_state(state)

    logger.debug(f"Applied {answer.id} ({answer.type.value}, normal {answer.normal_points:+d}, "
                 f"chaos {answer.chaos_points:+d}) -> {state}")
    if state.current_state != previous:
        logger.debug(f"Interview state changed: {previous.value} -> {state.current_state.value}")
    return state
