"""Tests for renderers"""
from rich.console import Console

from last_interview.agents.human_player import HumanPlayer
from last_interview.agents.random_agent import RandomPlayer
from last_interview.core.mood import InterviewerMood
from last_interview.core.orchestrator import InterviewOrchestrator
from last_interview.renderers.factory import create_renderer
from last_interview.renderers.null import NoRenderer
from last_interview.renderers.terminal import RichRenderer
from last_interview.schemas.content import InterviewState, OfficeInterruption
from last_interview.schemas.state import GameState


def _renderer():
    console = Console(record=True, width=120)
    return RichRenderer(console=console, delay=0), console


def test_create_renderer():
    assert isinstance(create_renderer(HumanPlayer()), RichRenderer)
    assert isinstance(create_renderer(HumanPlayer(), debug=True), NoRenderer)
    assert isinstance(create_renderer(RandomPlayer()), NoRenderer)


def test_renders_orchestrator_events(small_content):
    renderer, console = _renderer()
    orchestrator = InterviewOrchestrator(small_content, callbacks=[renderer.on_event])
    orchestrator.start()
    orchestrator.submit_answer(1)

    output = console.export_text()
    assert "Why do you want this job?" in output
    assert "1. Growth" in output
    assert "Noted." in output
    assert "A pen snaps." in output
    assert "Interview: normal" in output
    assert "Question 2" in output


def test_renders_state_with_mood():
    renderer, console = _renderer()
    renderer.render_state(InterviewState.TENSE, InterviewerMood.ANGRY)
    output = console.export_text()
    assert "Interview: tense" in output
    assert "angry" in output


def test_renders_flavor_and_ending(small_content):
    renderer, console = _renderer()
    renderer.render_flavor(small_content.office.rumors[0])
    renderer.render_flavor(OfficeInterruption(id="x", text="Lights out.", source="pop-up"))
    renderer.render_flavor(None)
    renderer.render_ending(small_content.endings[1], GameState(normal_points=10))

    output = console.export_text()
    assert "They never hire anyone." in output
    assert "[pop-up] Lights out." in output
    assert "Polite No" in output
    assert "normal 10 / chaos 0" in output


def test_null_renderer_accepts_everything(small_content):
    renderer = NoRenderer()
    orchestrator = InterviewOrchestrator(small_content, callbacks=[renderer.on_event])
    orchestrator.start()
    renderer.render_ending(small_content.endings[1], GameState())
    renderer.close()
