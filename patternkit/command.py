"""Rice cooker operations wrapped as commands."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class ElectricCooker:
    """The receiver: a rice cooker with a fire level and a pressure."""

    fire: str = ""
    pressure: str = ""

    def run(self, duration: str) -> str:
        """Describe running with the current settings for ``duration``."""
        return f"电饭煲设置火力为{self.fire},压力为{self.pressure},持续运行{duration};"

    def shutdown(self) -> str:
        """Describe stopping the cooker."""
        return "电饭煲停止运行。"


class CookCommand(ABC):
    """A command that operates a cooker."""

    def __init__(self, electric_cooker: ElectricCooker) -> None:
        self.electric_cooker = electric_cooker

    @abstractmethod
    def execute(self) -> str:
        """Carry out the command and describe what happened."""


class SteamRiceCommand(CookCommand):
    """Steam rice: medium fire, normal pressure, 30 minutes."""

    def execute(self) -> str:
        self.electric_cooker.fire = "中"
        self.electric_cooker.pressure = "正常"
        return "蒸饭:" + self.electric_cooker.run("30分钟")


class CookCongeeCommand(CookCommand):
    """Cook congee: high fire, strong pressure, 45 minutes."""

    def execute(self) -> str:
        self.electric_cooker.fire = "大"
        self.electric_cooker.pressure = "强"
        return "煮粥:" + self.electric_cooker.run("45分钟")


class ShutdownCommand(CookCommand):
    """Stop the cooker."""

    def execute(self) -> str:
        return self.electric_cooker.shutdown()


class ElectricCookerInvoker:
    """Holds a command and triggers it."""

    def __init__(self, cook_command: Optional[CookCommand] = None) -> None:
        self.cook_command = cook_command

    def execute_cook_command(self) -> str:
        """Execute the current command."""
        if self.cook_command is None:
            raise RuntimeError("no cook command set")
        return self.cook_command.execute()