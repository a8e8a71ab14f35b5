"""Simulation executor: play many scripted interviews and tally the endings"""
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from last_interview.agents.base import InterviewPlayer
from last_interview.constants import DEFAULT_META_INTERVAL, DEFAULT_SIMULATION_RUNS
from last_interview.core.orchestrator import InterviewOrchestrator
from last_interview.schemas.content import ContentModel

logger = logging.getLogger(__name__)

PlayerFactory = Callable[[int], InterviewPlayer]


@dataclass
class RunResult:
    """Outcome of one simulated interview"""
    run: int
    ending_id: str
    final_state: str
    normal_points: int
    chaos_points: int
    questions_answered: int
    answer_history: List[str] = field(default_factory=list)


@dataclass
class SimulationResult:
    """Aggregated outcome of a simulation"""
    player: str
    runs: List[RunResult] = field(default_factory=list)

    @property
    def total_runs(self) -> int:
        return len(self.runs)

    @property
    def ending_counts(self) -> Dict[str, int]:
        return dict(Counter(r.ending_id for r in self.runs).most_common())

    @property
    def state_counts(self) -> Dict[str, int]:
        return dict(Counter(r.final_state for r in self.runs).most_common())

    def unreached_endings(self, content: ContentModel) -> List[str]:
        reached = set(self.ending_counts)
        return [e.id for e in content.endings if e.id not in reached]


def run_simulation(content: ContentModel,
                   player_factory: PlayerFactory,
                   runs: int = DEFAULT_SIMULATION_RUNS,
                   meta_interval: int = DEFAULT_META_INTERVAL) -> SimulationResult:
    """Play ``runs`` interviews, each with a fresh player from ``player_factory(run)``

    One orchestrator is reused for every run; ``start`` resets all per-run state.

    Raises:
        ValueError: If runs is not positive
    """
    if runs < 1:
        raise ValueError(f"Number of runs must be positive, got {runs}")

    orchestrator = InterviewOrchestrator(content, meta_interval=meta_interval)
    result: Optional[SimulationResult] = None

    for run in range(runs):
        player = player_factory(run)
        if result is None:
            result = SimulationResult(player=str(player))
        player.on_interview_start()

        question = orchestrator.start()
        while question is not None:
            action = player.get_action(question.text, question.answers)
            question = orchestrator.submit_answer(action - 1)

        state = orchestrator.state
        player.on_interview_end(orchestrator.ending)
        result.runs.append(RunResult(
            run=run,
            ending_id=orchestrator.ending.id,
            final_state=state.current_state.value,
            normal_points=state.normal_points,
            chaos_points=state.chaos_points,
            questions_answered=state.questions_answered,
            answer_history=list(state.answer_history),
        ))
        logger.debug(f"Run {run}: {orchestrator.ending.id} ({state})")

    logger.info(f"Simulated {runs} interviews with {result.player}")
    return result


def print_summary(result: SimulationResult,
                  content: Optional[ContentModel] = None,
                  console: Optional[Console] = None) -> None:
    """Render ending and final state distributions as tables"""
    console = console or Console()
    total = result.total_runs

    console.print(f"\n[bold cyan]Simulation Results[/] ({total} runs, player: {result.player})")
    console.print("=" * 80)

    ending_table = Table(title="Endings", box=box.ROUNDED)
    ending_table.add_column("Ending", style="cyan")
    ending_table.add_column("Count", style="magenta")
    ending_table.add_column("Percentage", style="green")
    for ending_id, count in result.ending_counts.items():
        ending_table.add_row(ending_id, str(count), f"{count/total*100:.1f}%")
    console.print(ending_table)

    state_table = Table(title="Final States", box=box.ROUNDED)
    state_table.add_column("State", style="cyan")
    state_table.add_column("Count", style="magenta")
    state_table.add_column("Percentage", style="green")
    for state, count in result.state_counts.items():
        state_table.add_row(state, str(count), f"{count/total*100:.1f}%")
    console.print(state_table)

    if content is not None:
        unreached = result.unreached_endings(content)
        if unreached:
            console.print(f"[yellow]Never reached: {', '.join(unreached)}[/]")
