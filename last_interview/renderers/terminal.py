"""Terminal renderer for the interview using rich"""
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from last_interview.constants import READABILITY_DELAY
from last_interview.core.mood import InterviewerMood
from last_interview.renderers.base import BaseRenderer
from last_interview.schemas.content import (
    Answer,
    Ending,
    InterviewState,
    OfficeInterruption,
    OfficeRumor,
    Question,
)
from last_interview.schemas.state import GameState

STATE_STYLES = {
    InterviewState.NORMAL: "green",
    InterviewState.TENSE: "yellow",
    InterviewState.CHAOS: "red",
    InterviewState.HIRED_BY_MISTAKE: "magenta",
    InterviewState.VIOLENTLY_EXPELLED: "bold red",
}

MOOD_FACES = {
    InterviewerMood.NEUTRAL: "😐",
    InterviewerMood.HAPPY: "🙂",
    InterviewerMood.ANGRY: "😠",
}


class RichRenderer(BaseRenderer):
    """Rich Console renderer for interactive interviews"""

    def __init__(self, console: Optional[Console] = None, delay: float = READABILITY_DELAY):
        self.console = console or Console()
        self.delay = delay
        self.question_number = 0

    def render_title(self, title: str) -> None:
        self.console.print(f"\n✨ {title} ✨\n", style="bold magenta")

    def render_question(self, question: Question) -> None:
        """Render question text and numbered answers"""
        self.question_number += 1
        self.console.print(f"\n{'=' * 80}", style="blue")
        self.console.print(f"Question {self.question_number}", style="bold blue")
        self.console.print(f"{'=' * 80}\n", style="blue")
        self.console.print(f"[cyan]{escape(question.text)}[/]")

        self.console.print("\nAnswers:", style="bold green")
        for i, answer in enumerate(question.answers, 1):
            self.console.print(f"{i}. {escape(answer.text)}", style="green")
        self.console.print("\n[bold yellow]Enter answer number (or 'q' to quit):[/]")

    def render_reaction(self, answer: Answer) -> None:
        if answer.reaction_text:
            self.console.print(f"\n[italic]Interviewer: \"{escape(answer.reaction_text)}\"[/]")
        if answer.visual_consequence_text:
            self.console.print(f"[dim]{escape(answer.visual_consequence_text)}[/]")
        if self.delay:
            self._sleep_for_readability(self.delay)

    def render_state(self, state: InterviewState, mood: Optional[InterviewerMood] = None) -> None:
        line = f"[{STATE_STYLES[state]}]Interview: {state.value}[/]"
        if mood is not None:
            line += f"  {MOOD_FACES[mood]} {mood.value}"
        self.console.print(line)

    def render_flavor(self, flavor: Any) -> None:
        if isinstance(flavor, OfficeRumor):
            self.console.print(f"[dim italic]Rumor in the waiting room: {escape(flavor.text)}[/]")
        elif isinstance(flavor, OfficeInterruption):
            self.console.print(f"\n[bold yellow]⚠ \\[{escape(flavor.source)}] {escape(flavor.text)}[/]")
        elif flavor is not None:
            self.console.print(f"\n[dim]{escape(flavor.text)}[/]")

    def render_ending(self, ending: Ending, state: GameState) -> None:
        body = escape(ending.description or ending.title)
        subtitle = (f"normal {state.normal_points} / chaos {state.chaos_points} / "
                    f"{state.questions_answered} answers")
        self.console.print()
        self.console.print(Panel(body, title=f"[bold]{escape(ending.title)}[/]", subtitle=subtitle,
                                 border_style=STATE_STYLES[state.current_state]))

    def render_error(self, message: str) -> None:
        self.console.print(f"\nError: {message}", style="red bold")
