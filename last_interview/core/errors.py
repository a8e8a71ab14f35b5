"""Error hierarchy for the interview engine"""
from typing import Iterable, List, Optional


class InterviewError(Exception):
    """Base error for the interview engine"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ContentError(InterviewError):
    """Authored content is malformed (duplicate ids, dangling references, no fallback ending)"""

    def __init__(self, message: str, problems: Optional[Iterable[str]] = None):
        self.problems: List[str] = list(problems or [])
        if self.problems:
            message = message + ":\n" + "\n".join(f"  - {p}" for p in self.problems)
        super().__init__(message)


class SequenceError(InterviewError):
    """Orchestrator called out of order (answer before start, answer after the end)"""
    pass


class InvalidAnswerError(SequenceError):
    """Answer index does not exist on the current question"""
    pass


class AnswerProcessingError(InterviewError):
    """Answer cannot be applied to the game state"""
    pass


class AnswerAlreadyRecordedError(AnswerProcessingError):
    """Question was already answered in this playthrough"""
    pass
