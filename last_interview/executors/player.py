"""
Interactive interview player with rich terminal output
"""
import logging
from typing import Any, Optional

from last_interview.agents.base import InterviewPlayer
from last_interview.agents.human_player import HumanPlayer
from last_interview.core.errors import SequenceError
from last_interview.core.flavor import OfficeFlavor
from last_interview.core.orchestrator import QUESTION_PRESENTED, STATE_CHANGED, InterviewOrchestrator
from last_interview.renderers.base import BaseRenderer
from last_interview.renderers.factory import create_renderer
from last_interview.schemas.config import EngineConfig
from last_interview.schemas.content import ContentModel, Ending

logger = logging.getLogger(__name__)


def play_interview(content: ContentModel,
                   player: Optional[InterviewPlayer] = None,
                   renderer: Optional[BaseRenderer] = None,
                   config: Optional[EngineConfig] = None,
                   debug: bool = False) -> Optional[Ending]:
    """Play one interview from start to ending

    Args:
        content: Validated interview content
        player: Player choosing answers (defaults to HumanPlayer)
        renderer: Output renderer (defaults to the one create_renderer picks for the player)
        config: Engine configuration for seed, interruptions and meta pacing
        debug: Enable debug logging

    Returns:
        The ending reached, or None if the player quit
    """
    if debug:
        logger.setLevel(logging.DEBUG)
    config = config or EngineConfig()
    player = player or HumanPlayer()
    renderer = renderer or create_renderer(player, debug=debug)

    orchestrator = InterviewOrchestrator(content, meta_interval=config.meta_interval, debug=debug)
    flavor = OfficeFlavor(content.office, seed=config.seed)

    def on_event(event: str, data: Any) -> None:
        if event == STATE_CHANGED:
            renderer.render_state(data, orchestrator.mood)
            return
        if event == QUESTION_PRESENTED and orchestrator.state.questions_answered:
            # Interruptions only land between two questions, never before the ending
            renderer.render_flavor(flavor.maybe_interrupt(config.interruption_chance))
        renderer.on_event(event, data)

    orchestrator.add_callback(on_event)

    renderer.render_title(content.title)
    renderer.render_flavor(flavor.random_rumor())
    player.on_interview_start()

    try:
        question = orchestrator.start()
        while question is not None:
            action = player.get_action(question.text, question.answers)
            try:
                question = orchestrator.submit_answer(action - 1)
            except SequenceError as e:
                logger.warning(f"Rejected answer from {player}: {e.message}")
                renderer.render_error(e.message)

        renderer.render_ending(orchestrator.ending, orchestrator.state)
    except KeyboardInterrupt:
        logger.info("Interview interrupted by user.")
        return None
    finally:
        renderer.close()

    player.on_interview_end(orchestrator.ending)
    logger.debug(f"Interview ended with {orchestrator.ending.id}")
    return orchestrator.ending
