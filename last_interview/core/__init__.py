"""Core narrative engine for last-interview"""

from .conditions import evaluate_condition, matches_ending
from .content_registry import get_registry, load_content, validate_content
from .endings import resolve_ending
from .errors import ContentError, InvalidAnswerError, SequenceError
from .orchestrator import InterviewOrchestrator, InterviewPhase
from .processor import apply_answer
from .selector import select_next
from .transitions import derive_state, predominant_answer_type

__all__ = [
    'ContentError',
    'InterviewOrchestrator',
    'InterviewPhase',
    'InvalidAnswerError',
    'SequenceError',
    'apply_answer',
    'derive_state',
    'evaluate_condition',
    'get_registry',
    'load_content',
    'matches_ending',
    'predominant_answer_type',
    'resolve_ending',
    'select_next',
    'validate_content',
]
