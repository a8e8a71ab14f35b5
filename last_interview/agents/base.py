"""Base classes for interview players (human and scripted)"""
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from last_interview.schemas.content import Answer, Ending


class InterviewPlayer(ABC):
    """Abstract base class for interview players"""

    def __init__(self, skip_single: bool = False):
        """Initialize player with skip_single option"""
        self.skip_single = skip_single
        self._last_action: Optional[int] = None

    def get_action(self, observation: str, choices: Sequence[Answer]) -> int:
        """Get action number from the question text and its answers

        Args:
            observation: Current question text
            choices: Answers of the current question, in authored order

        Returns:
            Integer containing the choice number (1-based)

        Raises:
            ValueError: If no choices are provided
        """
        if not choices:
            raise ValueError("No choices provided")

        if self.skip_single and len(choices) == 1:
            self._last_action = 1
            return 1

        self._last_action = self._get_action_impl(observation, choices)
        return self._last_action

    @abstractmethod
    def _get_action_impl(self, observation: str, choices: Sequence[Answer]) -> int:
        """Implementation of action selection logic"""
        pass

    def get_last_action(self) -> Optional[int]:
        return self._last_action

    def reset(self) -> None:
        """Reset player state between interviews"""
        self._last_action = None

    def on_interview_start(self) -> None:
        """Called when an interview starts"""
        self._last_action = None

    def on_interview_end(self, ending: Ending) -> None:
        """Called when an interview resolves"""
        pass

    def __str__(self) -> str:
        return self.__class__.__name__
