"""A phone's battery modelled with the state pattern."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar


class BatteryState(ABC):
    """A battery state reacting to the charging cable being plugged or unplugged."""

    label: ClassVar[str] = ""

    @abstractmethod
    def connect_plug(self, iphone: IPhone) -> str:
        """Handle the cable being connected; return what happened."""

    @abstractmethod
    def disconnect_plug(self, iphone: IPhone) -> str:
        """Handle the cable being disconnected; return what happened."""

    def __str__(self) -> str:
        return self.label


class FullBatteryState(BatteryState):
    """The battery is full."""

    label = "满电状态"

    def connect_plug(self, iphone: IPhone) -> str:
        return iphone._pause_charge()

    def disconnect_plug(self, iphone: IPhone) -> str:
        iphone.battery_state = PART_BATTERY_STATE
        return f"{iphone._consume()},{self}转为{PART_BATTERY_STATE}"


class EmptyBatteryState(BatteryState):
    """The battery is empty."""

    label = "没电状态"

    def connect_plug(self, iphone: IPhone) -> str:
        iphone.battery_state = PART_BATTERY_STATE
        return f"{iphone._charge()},{self}转为{PART_BATTERY_STATE}"

    def disconnect_plug(self, iphone: IPhone) -> str:
        return iphone._shutdown()


class PartBatteryState(BatteryState):
    """The battery is partly charged."""

    label = "有电状态"

    def connect_plug(self, iphone: IPhone) -> str:
        iphone.battery_state = FULL_BATTERY_STATE
        return f"{iphone._charge()},{self}转为{FULL_BATTERY_STATE}"

    def disconnect_plug(self, iphone: IPhone) -> str:
        iphone.battery_state = EMPTY_BATTERY_STATE
        return f"{iphone._consume()},{self}转为{EMPTY_BATTERY_STATE}"


FULL_BATTERY_STATE = FullBatteryState()
EMPTY_BATTERY_STATE = EmptyBatteryState()
PART_BATTERY_STATE = PartBatteryState()


class IPhone:
    """A phone of a given model; starts partly charged."""

    def __init__(self, model: str) -> None:
        self.model = model
        self.battery_state: BatteryState = PART_BATTERY_STATE

    def battery_status(self) -> str:
        """Describe the current battery state."""
        return f"iPhone {self.model} 当前为{self.battery_state}"

    def connect_plug(self, ) -> str:
        """Connect the charging cable."""
        return f"iPhone {self.model} 连接电源线,{self.battery_state.connect_plug(self)}"

    def disconnect_plug(self) -> str:
        """Disconnect the charging cable."""
        return f"iPhone {self.model} 断开电源线,{self.battery_state.disconnect_plug(self)}"

    def _charge(self) -> str:
        return "正在充电"

    def _pause_charge(self) -> str:
        return "电已满,暂停充电"

    def _shutdown(self) -> str:
        return "手机关闭"

    def _consume(self) -> str:
        return "使用中,消耗电量"