"""Schema exports for last-interview"""

__all__ = [
    'Answer', 'AnswerType', 'ContentModel', 'Ending', 'EndingCondition', 'EngineConfig',
    'GameState', 'InterviewState', 'Question', 'QuestionCategory', 'QuestionType'
]

from .content import (
    Answer,
    AnswerType,
    ContentModel,
    Ending,
    EndingCondition,
    InterviewState,
    Question,
    QuestionCategory,
    QuestionType,
)
from .config import EngineConfig
from .state import GameState
