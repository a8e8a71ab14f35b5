"""Factory for creating interview players"""
import logging
from typing import Optional

from last_interview.agents.base import InterviewPlayer
from last_interview.agents.human_player import HumanPlayer
from last_interview.agents.random_agent import ArchetypePlayer, RandomPlayer
from last_interview.schemas.content import AnswerType

logger = logging.getLogger(__name__)


def create_player(kind: str, seed: Optional[int] = None, skip_single: bool = False) -> InterviewPlayer:
    """Create a player from its CLI name.

    Args:
        kind (str): Player name. Can be:
            - 'human' for interactive play
            - 'random' for a uniformly random player
            - an answer type (e.g. 'zen', 'aggressive') for an archetype player
        seed (Optional[int]): Random seed for scripted players
        skip_single (bool): Auto-select single answers (human player only)

    Returns:
        InterviewPlayer: Appropriate player instance

    Raises:
        ValueError: If the player kind is not recognized
    """
    logger.debug(f"Creating player: {kind} (seed={seed})")

    if kind == "human":
        return HumanPlayer(skip_single=skip_single)
    if kind == "random":
        return RandomPlayer(seed=seed)
    try:
        return ArchetypePlayer(AnswerType(kind), seed=seed)
    except ValueError:
        raise ValueError(f"Unknown player: {kind}") from None
