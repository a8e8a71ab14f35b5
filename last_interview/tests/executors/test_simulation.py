"""Tests for the simulation executor"""
import pytest
from rich.console import Console

from last_interview.agents.random_agent import ArchetypePlayer, RandomPlayer
from last_interview.executors.simulation import print_summary, run_simulation
from last_interview.schemas.content import AnswerType


def test_professional_candidates_are_politely_rejected(small_content):
    result = run_simulation(small_content, lambda run: ArchetypePlayer(AnswerType.PROFESSIONAL, seed=run),
                            runs=10)
    assert result.total_runs == 10
    assert result.ending_counts == {"polite_no": 10}
    assert result.state_counts == {"normal": 10}
    assert result.runs[0].answer_history == ["q1.a1", "q2.a1"]
    assert result.unreached_endings(small_content) == ["escorted_out"]


def test_runs_are_independent(small_content):
    result = run_simulation(small_content, lambda run: RandomPlayer(seed=run), runs=25)
    assert sum(result.ending_counts.values()) == 25
    assert set(result.ending_counts) <= {"escorted_out", "polite_no"}
    for run in result.runs:
        assert run.questions_answered == len(run.answer_history)
        assert run.questions_answered in (2, 3)


def test_default_content_simulation(default_content):
    result = run_simulation(default_content, lambda run: RandomPlayer(seed=run), runs=50)
    ending_ids = {e.id for e in default_content.endings}
    assert set(result.ending_counts) <= ending_ids
    assert result.player == "RandomPlayer"


def test_runs_must_be_positive(small_content):
    with pytest.raises(ValueError):
        run_simulation(small_content, lambda run: RandomPlayer(seed=run), runs=0)


def test_print_summary(small_content):
    result = run_simulation(small_content, lambda run: ArchetypePlayer("professional", seed=run), runs=4)
    console = Console(record=True, width=120)
    print_summary(result, small_content, console=console)

    output = console.export_text()
    assert "Simulation Results" in output
    assert "polite_no" in output
    assert "100.0%" in output
    assert "Never reached: escorted_out" in output
