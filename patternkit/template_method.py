"""Actors dressing up through a template method."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Actor(ABC):
    """An actor playing a role; ``dress_up`` fixes the order of the steps."""

    def __init__(self, role_name: str) -> None:
        self.role_name = role_name

    def dress_up(self) -> str:
        """Describe making up, clothing and accessorising, in that order."""
        return f"扮演{self.role_name}的" + self.make_up() + self.clothe() + self.wear()

    @abstractmethod
    def make_up(self) -> str:
        """Describe the make-up."""

    @abstractmethod
    def clothe(self) -> str:
        """Describe the clothes."""

    @abstractmethod
    def wear(self) -> str:
        """Describe the accessories."""


class WomanActor(Actor):
    """An actress."""

    def make_up(self) -> str:
        return "女演员涂着口红，画着眉毛；"

    def clothe(self) -> str:
        return "穿着连衣裙；"

    def wear(self) -> str:
        return "带着耳环，手拎着包；"


class ManActor(Actor):
    """An actor."""

    def make_up(self) -> str:
        return "男演员刮净胡子，抹上发胶；"

    def clothe(self) -> str:
        return "穿着一身西装；"

    def wear(self) -> str:
        return "带上手表，抽着烟；"


class ChildActor(Actor):
    """A child actor."""

    def make_up(self) -> str:
        return "儿童演员抹上红脸蛋；"

    def clothe(self) -> str:
        return "穿着一身童装；"

    def wear(self) -> str:
        return "手里拿着一串糖葫芦；"