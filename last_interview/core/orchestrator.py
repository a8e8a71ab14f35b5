"""Interview orchestrator: sequences questions, answers and the final ending"""
import logging
from enum import Enum
from typing import Any, Callable, List, Optional

from last_interview.constants import DEFAULT_META_INTERVAL
from last_interview.core.content_registry import validate_content
from last_interview.core.endings import resolve_ending
from last_interview.core.errors import InvalidAnswerError, SequenceError
from last_interview.core.mood import InterviewerMood, determine_mood
from last_interview.core.processor import apply_answer
from last_interview.core.selector import select_next
from last_interview.schemas.content import ContentModel, Ending, Question
from last_interview.schemas.state import GameState

# Events emitted to callbacks as callback(event, data)
QUESTION_PRESENTED = "question_presented"  # data: Question
ANSWER_RECORDED = "answer_recorded"  # data: (Question, Answer)
STATE_CHANGED = "state_changed"  # data: InterviewState
INTERVIEW_FINISHED = "interview_finished"  # data: ending id

InterviewCallback = Callable[[str, Any], None]


class InterviewPhase(Enum):
    """Lifecycle of one playthrough"""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"


class InterviewOrchestrator:
    """Runs one playthrough at a time over a shared, read-only content set.

    The orchestrator owns the GameState and is the only component that talks to
    presentation, through callbacks. Calling ``start`` again discards the
    previous playthrough entirely.
    """

    def __init__(self,
                 content: ContentModel,
                 callbacks: Optional[List[InterviewCallback]] = None,
                 meta_interval: int = DEFAULT_META_INTERVAL,
                 debug: bool = False):
        """Initialize the orchestrator.

        Args:
            content: Authored content, validated here before any playthrough
            callbacks: Listeners called as callback(event, data)
            meta_interval: Non-meta answers required before a meta question (0 disables)
            debug: Enable debug logging

        Raises:
            ContentError: If the content is malformed
        """
        self.logger = logging.getLogger(self.__class__.__name__)
        if debug:
            self.logger.setLevel(logging.DEBUG)

        self.content = validate_content(content)
        self.callbacks = list(callbacks or [])
        self.meta_interval = meta_interval

        self.phase = InterviewPhase.NOT_STARTED
        self.state: Optional[GameState] = None
        self.current_question: Optional[Question] = None
        self.ending: Optional[Ending] = None

    def add_callback(self, callback: InterviewCallback) -> None:
        self.callbacks.append(callback)

    def _notify_callbacks(self, event: str, data: Any = None) -> None:
        """Notify all callbacks of an event"""
        for callback in self.callbacks:
            try:
                callback(event, data)
            except Exception as e:
                self.logger.error(f"Error in {event} callback: {e}", exc_info=True)

    @property
    def is_finished(self) -> bool:
        return self.phase == InterviewPhase.RESOLVED

    @property
    def mood(self) -> InterviewerMood:
        if self.state is None:
            return InterviewerMood.NEUTRAL
        return determine_mood(self.state)

    def start(self) -> Optional[Question]:
        """Begin a fresh playthrough.

        Returns:
            The first question, or None if the content offers no eligible question
            (the interview is then resolved immediately)
        """
        self.state = GameState()
        self.current_question = None
        self.ending = None
        self.phase = InterviewPhase.IN_PROGRESS
        self.logger.info(f"Interview started: {self.content.title}")
        return self._advance()

    def submit_answer(self, answer_index: int) -> Optional[Question]:
        """Answer the current question.

        Args:
            answer_index: 0-based index into the current question's answers

        Returns:
            The next question, or None when the interview has been resolved

        Raises:
            SequenceError: If no interview is in progress
            InvalidAnswerError: If the index does not name an answer
        """
        if self.phase != InterviewPhase.IN_PROGRESS or self.current_question is None:
            self.logger.error(f"Answer submitted while interview is {self.phase.value}")
            raise SequenceError(f"Cannot answer while the interview is {self.phase.value}")

        question = self.current_question
        answer = None
        # bool is an int subclass; True must not select answer 1
        if isinstance(answer_index, int) and not isinstance(answer_index, bool):
            answer = question.answer_at(answer_index)
        if answer is None:
            self.logger.error(f"Invalid answer index {answer_index!r} for {question.id} "
                              f"({len(question.answers)} answers)")
            raise InvalidAnswerError(
                f"Invalid answer index {answer_index!r}. Valid indices: 0-{len(question.answers) - 1}")

        apply_answer(self.state, question, answer)
        self._notify_callbacks(ANSWER_RECORDED, (question, answer))
        self._notify_callbacks(STATE_CHANGED, self.state.current_state)
        return self._advance()

    def _advance(self) -> Optional[Question]:
        """Present the next eligible question or resolve the interview"""
        self.current_question = select_next(self.state, self.content.questions, self.meta_interval)
        if self.current_question is not None:
            self._notify_callbacks(QUESTION_PRESENTED, self.current_question)
            return self.current_question
        self._finish()
        return None

    def _finish(self) -> None:
        self.phase = InterviewPhase.RESOLVED
        self.ending = resolve_ending(self.state, self.content.endings, self.content.fallback_ending)
        self.logger.info(f"Interview finished after {self.state.questions_answered} answers: "
                         f"{self.ending.id} ({self.state})")
        self._notify_callbacks(INTERVIEW_FINISHED, self.ending.id)
