"""Factory for creating the appropriate renderer for a player"""
from last_interview.agents.base import InterviewPlayer
from last_interview.agents.human_player import HumanPlayer
from last_interview.renderers.base import BaseRenderer
from last_interview.renderers.null import NoRenderer
from last_interview.renderers.terminal import RichRenderer


def create_renderer(player: InterviewPlayer, debug: bool = False) -> BaseRenderer:
    """Create appropriate renderer based on player type and mode

    Args:
        player (InterviewPlayer): The player that will be using the renderer
        debug (bool, optional): Whether debug mode is enabled. Defaults to False.

    Returns:
        BaseRenderer: The appropriate renderer instance

    In debug mode log output replaces rendering, so NoRenderer is used. Human
    players get a RichRenderer; scripted players run silently.
    """
    if debug:
        return NoRenderer()
    if isinstance(player, HumanPlayer):
        return RichRenderer()
    return NoRenderer()
