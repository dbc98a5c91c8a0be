"""A collection of cars with higher-order query helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable


@dataclass
class Car:
    """A car model, its manufacturer and build year."""

    model: str
    manufacturer: str
    build_year: int


class Cars(list[Car]):
    """A list of cars."""

    def process(self, f: Callable[[Car], None]) -> None:
        """Call ``f`` on every car."""
        for car in self:
            f(car)

    def find_all(self, f: Callable[[Car], bool]) -> Cars:
        """Return the cars for which ``f`` is true."""
        found = Cars()
        self.process(lambda car: found.append(car) if f(car) else None)
        return found

    def map(self, f: Callable[[Car], Any]) -> list[Any]:
        """Return ``f`` applied to every car."""
        result: list[Any] = []
        self.process(lambda car: result.append(f(car)))
        return result


def make_sorted_appender(
    manufacturers: Iterable[str],
) -> tuple[Callable[[Car], None], dict[str, Cars]]:
    """Return an appender that files cars by manufacturer, and the dict it fills.

    Cars of a manufacturer not listed go under the key ``"Default"``.
    """
    sorted_cars: dict[str, Cars] = {m: Cars() for m in manufacturers}
    sorted_cars["Default"] = Cars()

    def appender(car: Car) -> None:
        key = car.manufacturer if car.manufacturer in sorted_cars else "Default"
        sorted_cars[key].append(car)

    return appender, sorted_cars