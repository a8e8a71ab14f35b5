"""Resolves the ending of a finished interview"""
import logging
from typing import Optional, Sequence

from last_interview.core.conditions import matches_ending
from last_interview.core.errors import ContentError
from last_interview.schemas.content import Ending
from last_interview.schemas.state import GameState

logger = logging.getLogger(__name__)


def resolve_ending(state: GameState,
                   endings: Sequence[Ending],
                   default: Optional[Ending] = None) -> Ending:
    """Return the first ending, in authored order, whose condition matches.

    Authored order is the priority order. When nothing matches, the designated
    default is returned (the last authored ending when no default is given),
    so a player always gets an ending.

    Args:
        state: Final game state
        endings: Authored ending table
        default: Ending to fall back to

    Returns:
        The resolved Ending

    Raises:
        ContentError: If the ending table is empty
    """
    if not endings:
        raise ContentError("Cannot resolve an ending from an empty ending table")

    for ending in endings:
        if matches_ending(ending.condition, state):
            logger.debug(f"Ending {ending.id} matched {state}")
            return ending

    fallback = default if default is not None else endings[-1]
    logger.warning(f"No ending matched {state}; falling back to {fallback.id}. "
                   "The ending table should end with an unconditioned catch-all.")
    return fallback
