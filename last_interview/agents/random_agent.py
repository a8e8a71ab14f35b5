"""Scripted players for simulations and tests"""
import logging
import random
from typing import Optional, Sequence, Union

from last_interview.agents.base import InterviewPlayer
from last_interview.schemas.content import Answer, AnswerType


class RandomPlayer(InterviewPlayer):
    """Player that randomly selects from available answers.
    Used for exploring content and finding unreachable endings."""

    def __init__(self, seed: Optional[int] = None):
        """Initialize random player.

        Args:
            seed (int, optional): Random seed for reproducibility. Defaults to None.
        """
        super().__init__(skip_single=True)
        self.logger = logging.getLogger(self.__class__.__name__)
        self.rng = random.Random(seed)

    def _get_action_impl(self, observation: str, choices: Sequence[Answer]) -> int:
        return self.rng.randint(1, len(choices))


class ArchetypePlayer(RandomPlayer):
    """Player that always picks answers of one type when the question offers one.

    Falls back to a random answer otherwise. Useful to check that every
    type-driven ending is reachable.
    """

    def __init__(self, answer_type: Union[AnswerType, str], seed: Optional[int] = None):
        super().__init__(seed=seed)
        self.answer_type = AnswerType(answer_type)

    def _get_action_impl(self, observation: str, choices: Sequence[Answer]) -> int:
        preferred = [i for i, answer in enumerate(choices, 1) if answer.type == self.answer_type]
        if preferred:
            return self.rng.choice(preferred)
        self.logger.debug(f"No {self.answer_type.value} answer available, picking at random")
        return super()._get_action_impl(observation, choices)

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.answer_type.value})"
