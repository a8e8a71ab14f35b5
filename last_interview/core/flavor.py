"""Random office flavor: events, interruptions and rumors"""
import random
from typing import Optional, Sequence, TypeVar, Union

from last_interview.schemas.content import OfficeContent, OfficeEvent, OfficeInterruption, OfficeRumor

T = TypeVar("T")


class OfficeFlavor:
    """Draws flavor entries from authored office tables.

    Used only by presentation; nothing here touches the game state.
    """

    def __init__(self, office: OfficeContent, seed: Optional[int] = None):
        self.office = office
        self.rng = random.Random(seed)

    def _pick(self, entries: Sequence[T]) -> Optional[T]:
        if not entries:
            return None
        return self.rng.choice(entries)

    def random_event(self) -> Optional[OfficeEvent]:
        return self._pick(self.office.events)

    def random_interruption(self) -> Optional[OfficeInterruption]:
        return self._pick(self.office.interruptions)

    def random_rumor(self) -> Optional[OfficeRumor]:
        return self._pick(self.office.rumors)

    def maybe_interrupt(self, chance: float) -> Optional[Union[OfficeEvent, OfficeInterruption]]:
        """With the given probability, return an interruption or a background event"""
        if chance <= 0 or self.rng.random() >= chance:
            return None
        pools = [p for p in (self.office.interruptions, self.office.events) if p]
        if not pools:
            return None
        return self._pick(self.rng.choice(pools))
