"""Seasonal weather of a city chosen by a strategy."""

from __future__ import annotations

from abc import ABC
from typing import ClassVar, Optional


class Season(ABC):
    """A season, describing the weather it brings to each known city."""

    season_name: ClassVar[str] = ""
    default_weathers: ClassVar[dict[str, str]] = {}

    def __init__(self) -> None:
        self.weathers = dict(self.default_weathers)

    def show_weather(self, city: str) -> str:
        """Describe this season's weather in ``city``; unknown cities get an empty description."""
        return f"{city}的{self.season_name}，{self.weathers.get(city, '')};"


class Spring(Season):
    """Spring."""

    season_name = "春天"
    default_weathers = {"北京": "干燥多风", "昆明": "清凉舒适"}


class Summer(Season):
    """Summer."""

    season_name = "夏天"
    default_weathers = {"北京": "高温多雨", "昆明": "清凉舒适"}


class Autumn(Season):
    """Autumn."""

    season_name = "秋天"
    default_weathers = {"北京": "凉爽舒适", "昆明": "清凉舒适"}


class Winter(Season):
    """Winter."""

    season_name = "冬天"
    default_weathers = {"北京": "干燥寒冷", "昆明": "清凉舒适"}


class City:
    """A city with a climate feature and a current season."""

    def __init__(self, name: str, feature: str, season: Optional[Season] = None) -> None:
        self.name = name
        self.feature = feature
        self.season = season

    def __str__(self) -> str:
        if self.season is None:
            raise RuntimeError("no season set")
        return f"{self.name}{self.feature}，{self.season.show_weather(self.name)}"