"""Aircraft coordinating landings through an approach tower."""

from __future__ import annotations

from abc import ABC
from collections import deque
from typing import ClassVar, Optional, TextIO


class Aircraft(ABC):
    """An aircraft that asks the tower before landing.

    Each method writes its line to ``out`` and returns it.
    """

    _waiting: ClassVar[str]
    _landed: ClassVar[str]
    _departed: ClassVar[str]

    def __init__(
        self, name: str, mediator: ApproachTower, out: Optional[TextIO] = None
    ) -> None:
        self.name = name
        self.mediator = mediator
        self.out = out

    def approach_airport(self) -> str:
        """Ask to land; land if the runway is free, otherwise wait."""
        if not self.mediator.can_land_airport(self):
            return self._emit(self._waiting.format(name=self.name))
        return self._emit(self._landed.format(name=self.name))

    def depart_airport(self) -> str:
        """Take off and let the tower call in the next waiting aircraft."""
        line = self._emit(self._departed.format(name=self.name))
        self.mediator.notify_waiting_aircraft()
        return line

    def _emit(self, line: str) -> str:
        print(line, file=self.out)
        return line


class Airliner(Aircraft):
    """A passenger airliner."""

    _waiting = "机场繁忙，客机{name}继续等待降落;"
    _landed = "客机{name}成功滑翔降落机场;"
    _departed = "客机{name}成功滑翔起飞，离开机场;"


class Helicopter(Aircraft):
    """A helicopter."""

    _waiting = "机场繁忙，直升机{name}继续等待降落;"
    _landed = "直升机{name}成功垂直降落机场;"
    _departed = "直升机{name}成功垂直起飞，离开机场;"


class ApproachTower:
    """The tower: grants the single runway and queues aircraft that must wait."""

    def __init__(self, has_free_airstrip: bool = False) -> None:
        self.has_free_airstrip = has_free_airstrip
        self.waiting_queue: deque[Aircraft] = deque()

    def can_land_airport(self, aircraft: Aircraft) -> bool:
        """Grant the runway if free; otherwise queue the aircraft and refuse."""
        if self.has_free_airstrip:
            self.has_free_airstrip = False
            return True
        self.waiting_queue.append(aircraft)
        return False

    def notify_waiting_aircraft(self) -> None:
        """Free the runway and let the first waiting aircraft approach."""
        self.has_free_airstrip = True
        if self.waiting_queue:
            self.waiting_queue.popleft().approach_airport()