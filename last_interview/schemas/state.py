"""Runtime state of one interview playthrough"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Set

from last_interview.schemas.content import AnswerType, InterviewState


@dataclass
class GameState:
    """The single mutable aggregate of a playthrough.

    Only ``last_interview.core.processor.apply_answer`` mutates it during play;
    ``reset`` restores every field at once.
    """
    normal_points: int = 0
    chaos_points: int = 0
    current_state: InterviewState = InterviewState.NORMAL
    questions_answered: int = 0
    answered_question_ids: Set[str] = field(default_factory=set)
    answer_history: List[str] = field(default_factory=list)  # Answer ids, in answer order
    answer_type_history: List[AnswerType] = field(default_factory=list)
    non_meta_questions_answered: int = 0  # Answers since the last meta question

    @property
    def total_points(self) -> int:
        """Normal plus chaos points, always recomputed"""
        return self.normal_points + self.chaos_points

    def is_answered(self, question_id: str) -> bool:
        return question_id in self.answered_question_ids

    def reset(self) -> None:
        """Restore the initial playthrough state"""
        self.normal_points = 0
        self.chaos_points = 0
        self.current_state = InterviewState.NORMAL
        self.questions_answered = 0
        self.answered_question_ids = set()
        self.answer_history = []
        self.answer_type_history = []
        self.non_meta_questions_answered = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert GameState to dictionary"""
        return {
            'normal_points': self.normal_points,
            'chaos_points': self.chaos_points,
            'total_points': self.total_points,
            'current_state': self.current_state.value,
            'questions_answered': self.questions_answered,
            'answered_question_ids': sorted(self.answered_question_ids),
            'answer_history': list(self.answer_history),
            'answer_type_history': [t.value for t in self.answer_type_history],
            'non_meta_questions_answered': self.non_meta_questions_answered,
        }

    def __str__(self) -> str:
        return (f"{self.current_state.value} (normal={self.normal_points}, "
                f"chaos={self.chaos_points}, answered={self.questions_answered})")
