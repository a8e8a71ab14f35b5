"""Authored content schemas: questions, answers, endings and their conditions

Everything here is loaded once per process and shared read-only, so every model
is frozen. Conditions are closed tagged unions discriminated on ``kind``; the
evaluator in ``last_interview.core.conditions`` dispatches over exactly these
variants.
"""
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AnswerType(str, Enum):
    """Tone of an answer, used for the predominant-type rules"""
    PROFESSIONAL = "professional"
    ABSURD_COHERENT = "absurd_coherent"
    ABSURD_EXTREME = "absurd_extreme"
    AGGRESSIVE = "aggressive"
    ZEN = "zen"
    SOCIOPATHIC = "sociopathic"


class QuestionType(str, Enum):
    """Question tier; selection prefers BASE, then SPECIAL, then SECRET"""
    BASE = "base"
    SPECIAL = "special"
    SECRET = "secret"

    @property
    def rank(self) -> int:
        return _QUESTION_TYPE_RANK[self]


_QUESTION_TYPE_RANK = {
    QuestionType.BASE: 0,
    QuestionType.SPECIAL: 1,
    QuestionType.SECRET: 2,
}


class QuestionCategory(str, Enum):
    """Topic of a question"""
    GENERAL = "general"
    PERSONALITY = "personality"
    EXPERIENCE = "experience"
    ETHICS = "ethics"
    ABSURD = "absurd"
    META = "meta"


class InterviewState(str, Enum):
    """Mood of the interview, derived from total points and answer types"""
    NORMAL = "normal"
    TENSE = "tense"
    CHAOS = "chaos"
    HIRED_BY_MISTAKE = "hired_by_mistake"
    VIOLENTLY_EXPELLED = "violently_expelled"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


# Question unlock conditions

class MinNormalPoints(_Frozen):
    kind: Literal["min_normal_points"] = "min_normal_points"
    value: int


class MinChaosPoints(_Frozen):
    kind: Literal["min_chaos_points"] = "min_chaos_points"
    value: int


class MaxNormalPoints(_Frozen):
    kind: Literal["max_normal_points"] = "max_normal_points"
    value: int


class MaxChaosPoints(_Frozen):
    kind: Literal["max_chaos_points"] = "max_chaos_points"
    value: int


class StateTense(_Frozen):
    kind: Literal["state_tense"] = "state_tense"


class StateChaos(_Frozen):
    kind: Literal["state_chaos"] = "state_chaos"


class SpecificAnswer(_Frozen):
    """Holds once the related question has been answered (any answer)"""
    kind: Literal["specific_answer"] = "specific_answer"
    related_question_id: str


QuestionCondition = Annotated[
    Union[MinNormalPoints, MinChaosPoints, MaxNormalPoints, MaxChaosPoints, StateTense,
          StateChaos, SpecificAnswer],
    Field(discriminator="kind"),
]


# Range bounds for ending conditions

class Unbounded(_Frozen):
    kind: Literal["unbounded"] = "unbounded"


class AtLeast(_Frozen):
    kind: Literal["at_least"] = "at_least"
    value: int


class AtMost(_Frozen):
    kind: Literal["at_most"] = "at_most"
    value: int


Bound = Annotated[Union[Unbounded, AtLeast, AtMost], Field(discriminator="kind")]


class PointRange(_Frozen):
    """Inclusive range on one points track; both ends default to Unbounded"""
    lower: Bound = Field(default_factory=Unbounded)
    upper: Bound = Field(default_factory=Unbounded)

    @property
    def is_unbounded(self) -> bool:
        return isinstance(self.lower, Unbounded) and isinstance(self.upper, Unbounded)

    @classmethod
    def between(cls, minimum: Optional[int] = None, maximum: Optional[int] = None) -> 'PointRange':
        """Build a range from optional min/max values"""
        return cls(
            lower=Unbounded() if minimum is None else AtLeast(value=minimum),
            upper=Unbounded() if maximum is None else AtMost(value=maximum),
        )


# Authored flat keys -> range field they fold into
_RANGE_KEYS = {
    "total_points": ("min_total_points", "max_total_points"),
    "normal_points": ("min_normal_points", "max_normal_points"),
    "chaos_points": ("min_chaos_points", "max_chaos_points"),
}


class EndingCondition(_Frozen):
    """Conjunction of optional checks; an unset field never excludes a state"""
    total_points: PointRange = Field(default_factory=PointRange)
    normal_points: PointRange = Field(default_factory=PointRange)
    chaos_points: PointRange = Field(default_factory=PointRange)
    required_state: Optional[InterviewState] = None
    predominant_answer_type: Optional[AnswerType] = None
    required_answer_ids: Tuple[str, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _fold_flat_bounds(cls, data: Any) -> Any:
        """Accept ``min_total_points: 70`` style keys as authored in content files"""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for field_name, (min_key, max_key) in _RANGE_KEYS.items():
            if min_key not in data and max_key not in data:
                continue
            if field_name in data:
                raise ValueError(f"Use either {field_name} or {min_key}/{max_key}, not both")
            data[field_name] = PointRange.between(data.pop(min_key, None), data.pop(max_key, None))
        return data

    @property
    def is_unconditioned(self) -> bool:
        """True when no field is set, so the condition matches every state"""
        return (self.total_points.is_unbounded and self.normal_points.is_unbounded
                and self.chaos_points.is_unbounded and self.required_state is None
                and self.predominant_answer_type is None and not self.required_answer_ids)


class Answer(_Frozen):
    """One selectable reply to a question"""
    id: Optional[str] = None  # Token recorded in answer history, assigned on load if omitted
    text: str
    normal_points: int = 0
    chaos_points: int = 0
    type: AnswerType
    reaction_text: str = ""
    visual_consequence_text: str = ""


class Question(_Frozen):
    """A prompt with a fixed, ordered list of answers"""
    id: str
    text: str
    answers: Tuple[Answer, ...] = Field(min_length=1)
    type: QuestionType = QuestionType.BASE
    category: QuestionCategory = QuestionCategory.GENERAL
    unlock_conditions: Tuple[QuestionCondition, ...] = ()
    contradicts_question_id: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _assign_answer_ids(cls, data: Any) -> Any:
        """Give every answer without an id the token ``<question_id>.a<n>``"""
        if not isinstance(data, dict) or "id" not in data:
            return data
        answers = data.get("answers")
        if not isinstance(answers, (list, tuple)):
            return data
        assigned = []
        for i, answer in enumerate(answers, 1):
            default_id = f"{data['id']}.a{i}"
            if isinstance(answer, Answer):
                if answer.id is None:
                    answer = answer.model_copy(update={"id": default_id})
            elif isinstance(answer, dict) and not answer.get("id"):
                answer = {**answer, "id": default_id}
            assigned.append(answer)
        return {**data, "answers": assigned}

    def answer_at(self, index: int) -> Optional[Answer]:
        """Answer at a 0-based index, None when out of range"""
        if 0 <= index < len(self.answers):
            return self.answers[index]
        return None


class Ending(_Frozen):
    """Terminal narrative outcome"""
    id: str
    title: str
    description: str = ""
    condition: EndingCondition = Field(default_factory=EndingCondition)


class OfficeEvent(_Frozen):
    """Random background happening in the office"""
    id: str
    text: str


class OfficeInterruption(_Frozen):
    """Awkward interruption during the interview"""
    id: str
    text: str
    source: str = "office"  # Who interrupts: pop-up, interviewer, system, phone call...


class OfficeRumor(_Frozen):
    """Rumor told to the candidate before the interview"""
    id: str
    text: str


class OfficeContent(_Frozen):
    """Flavor tables; never affect scoring"""
    events: Tuple[OfficeEvent, ...] = ()
    interruptions: Tuple[OfficeInterruption, ...] = ()
    rumors: Tuple[OfficeRumor, ...] = ()


class ContentModel(_Frozen):
    """Complete authored content set

    Structural validation happens here; cross-reference checks (duplicate ids,
    dangling references, missing catch-all ending) live in
    ``last_interview.core.content_registry.validate_content``.
    """
    title: str = "The Last Interview"
    questions: Tuple[Question, ...] = Field(min_length=1)
    endings: Tuple[Ending, ...] = Field(min_length=1)
    default_ending: Optional[str] = None  # Id of the ending used when nothing matches
    office: OfficeContent = Field(default_factory=OfficeContent)

    def get_question(self, question_id: str) -> Optional[Question]:
        return next((q for q in self.questions if q.id == question_id), None)

    def get_ending(self, ending_id: str) -> Optional[Ending]:
        return next((e for e in self.endings if e.id == ending_id), None)

    @property
    def fallback_ending(self) -> Ending:
        """Designated default ending, or the last authored one"""
        if self.default_ending:
            ending = self.get_ending(self.default_ending)
            if ending is not None:
                return ending
        return self.endings[-1]

    def answer_ids(self) -> List[str]:
        return [a.id for q in self.questions for a in q.answers]

    def summary(self) -> Dict[str, int]:
        """Counts per question type plus endings, for CLI display"""
        counts = {qtype.value: 0 for qtype in QuestionType}
        for question in self.questions:
            counts[question.type.value] += 1
        counts["endings"] = len(self.endings)
        return counts
