"""Airport boarding handled as a chain of responsibility."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TextIO


@dataclass
class Passenger:
    """A passenger and the boarding steps completed so far."""

    name: str
    has_boarding_pass: bool = False
    has_luggage: bool = False
    is_pass_identity_check: bool = False
    is_pass_security_check: bool = False
    is_complete_for_boarding: bool = False


class BoardingProcessor:
    """One step of the boarding process; hands the passenger on to the next step.

    ``process_for`` writes one line per message and returns every message
    produced by this step and the steps after it.
    """

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.out = out
        self.next_processor: Optional[BoardingProcessor] = None

    def set_next_processor(self, processor: BoardingProcessor) -> None:
        """Set the step that follows this one."""
        self.next_processor = processor

    def process_for(self, passenger: Passenger) -> list[str]:
        """Pass the passenger on to the next step, if any."""
        if self.next_processor is not None:
            return self.next_processor.process_for(passenger)
        return []

    def _emit(self, message: str) -> str:
        print(message, file=self.out)
        return message


class BoardingPassProcessor(BoardingProcessor):
    """Issues a boarding pass."""

    def process_for(self, passenger: Passenger) -> list[str]:
        messages = []
        if not passenger.has_boarding_pass:
            messages.append(self._emit(f"为旅客{passenger.name}办理登机牌;"))
            passenger.has_boarding_pass = True
        return messages + super().process_for(passenger)


class LuggageCheckInProcessor(BoardingProcessor):
    """Checks in luggage."""

    def process_for(self, passenger: Passenger) -> list[str]:
        if not passenger.has_boarding_pass:
            return [self._emit(f"旅客{passenger.name}未办理登机牌，不能托运行李;")]
        messages = []
        if passenger.has_luggage:
            messages.append(self._emit(f"为旅客{passenger.name}办理行李托运;"))
        return messages + super().process_for(passenger)


class IdentityCheckProcessor(BoardingProcessor):
    """Verifies the passenger's identity."""

    def process_for(self, passenger: Passenger) -> list[str]:
        if not passenger.has_boarding_pass:
            return [self._emit(f"旅客{passenger.name}未办理登机牌，不能办理身份校验;")]
        messages = []
        if not passenger.is_pass_identity_check:
            messages.append(self._emit(f"为旅客{passenger.name}核实身份信息;"))
            passenger.is_pass_identity_check = True
        return messages + super().process_for(passenger)


class SecurityCheckProcessor(BoardingProcessor):
    """Performs the security check."""

    def process_for(self, passenger: Passenger) -> list[str]:
        if not passenger.has_boarding_pass:
            return [self._emit(f"旅客{passenger.name}未办理登机牌，不能进行安检;")]
        messages = []
        if not passenger.is_pass_security_check:
            messages.append(self._emit(f"为旅客{passenger.name}进行安检;"))
            passenger.is_pass_security_check = True
        return messages + super().process_for(passenger)


class CompleteBoardingProcessor(BoardingProcessor):
    """Boards the passenger if every earlier check has passed."""

    def process_for(self, passenger: Passenger) -> list[str]:
        if not (
            passenger.has_boarding_pass
            and passenger.is_pass_identity_check
            and passenger.is_pass_security_check
        ):
            return [self._emit(f"旅客{passenger.name}登机检查过程未完成，不能登机;")]
        passenger.is_complete_for_boarding = True
        return [self._emit(f"旅客{passenger.name}成功登机;")]


def build_boarding_processor_chain() -> BoardingProcessor:
    """Build the full boarding chain and return its first step."""
    complete = CompleteBoardingProcessor()
    security = SecurityCheckProcessor()
    security.set_next_processor(complete)
    identity = IdentityCheckProcessor()
    identity.set_next_processor(security)
    luggage = LuggageCheckInProcessor()
    luggage.set_next_processor(identity)
    boarding_pass = BoardingPassProcessor()
    boarding_pass.set_next_processor(luggage)
    return boarding_pass