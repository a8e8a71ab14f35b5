"""Base interface for all renderers"""
import time
from abc import ABC, abstractmethod
from typing import Any, Optional

from last_interview.core.mood import InterviewerMood
from last_interview.core.orchestrator import ANSWER_RECORDED, QUESTION_PRESENTED, STATE_CHANGED
from last_interview.schemas.content import (
    Answer,
    Ending,
    InterviewState,
    Question,
)
from last_interview.schemas.state import GameState


class BaseRenderer(ABC):
    """Base interface for all renderers

    A renderer can be subscribed to an InterviewOrchestrator directly:
    ``orchestrator.add_callback(renderer.on_event)``.
    """

    def _sleep_for_readability(self, seconds: float = 1.0) -> None:
        """Sleep for specified duration to allow text to be read

        Args:
            seconds (float): Number of seconds to sleep
        """
        time.sleep(seconds)

    def on_event(self, event: str, data: Any) -> None:
        """Orchestrator callback"""
        if event == QUESTION_PRESENTED:
            self.render_question(data)
        elif event == ANSWER_RECORDED:
            _, answer = data
            self.render_reaction(answer)
        elif event == STATE_CHANGED:
            self.render_state(data)

    @abstractmethod
    def render_question(self, question: Question) -> None:
        """Render a question with its numbered answers

        Args:
            question (Question): Question being presented
        """
        pass

    def render_title(self, title: str) -> None:
        """Optional: Render the game title"""
        pass

    def render_reaction(self, answer: Answer) -> None:
        """Optional: Render the interviewer's reaction to an answer"""
        pass

    def render_state(self, state: InterviewState, mood: Optional[InterviewerMood] = None) -> None:
        """Optional: Render the interview state"""
        pass

    def render_flavor(self, flavor: Any) -> None:
        """Optional: Render an office event, interruption or rumor

        Args:
            flavor: OfficeEvent, OfficeInterruption or OfficeRumor
        """
        pass

    def render_ending(self, ending: Ending, state: GameState) -> None:
        """Optional: Render the final ending"""
        pass

    def render_error(self, message: str) -> None:
        """Optional: Render error message

        Args:
            message (str): Error message to display
        """
        pass

    def close(self) -> None:
        """Optional: Clean up resources"""
        pass
