"""Credit card notifications delivered to subscribers by message type."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import ClassVar, Optional, TextIO


class MsgType(IntEnum):
    """Kinds of credit card message."""

    CONSUME = 0
    BILL = 1
    EXPIRE = 2


class Subscriber:
    """A channel that receives credit card messages.

    Subscribers are identified by ``name``; each writes one line per message.
    """

    name: ClassVar[str] = ""
    _template: ClassVar[str] = "通过【{name}】发送消息:{message}"

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.out = out

    def update(self, message: str) -> str:
        """Deliver a message; writes and returns the delivered line."""
        line = self._template.format(name=self.name, message=message)
        print(line, file=self.out if self.out is not None else sys.stdout)
        return line


class ShortMessage(Subscriber):
    """Text message subscriber."""

    name = "手机短息"


class Email(Subscriber):
    """E-mail subscriber."""

    name = "电子邮件"


class Telephone(Subscriber):
    """Telephone subscriber."""

    name = "电话"
    _template = "通过【{name}】告知:{message}"


class CreditCard:
    """A credit card that notifies its subscribers of consumption, bills and arrears."""

    def __init__(self, holder: str) -> None:
        self.holder = holder
        self.consume_sum = 0.0
        self.subscriber_group: dict[MsgType, list[Subscriber]] = {}

    def subscribe(self, subscriber: Subscriber, *msg_types: MsgType) -> None:
        """Subscribe to each of the given message types."""
        for msg_type in msg_types:
            self.subscriber_group.setdefault(msg_type, []).append(subscriber)

    def unsubscribe(self, subscriber: Subscriber, *msg_types: MsgType) -> None:
        """Remove the subscriber with the same name from each given type.

        The removed entry is swapped with the last one before being dropped.
        """
        for msg_type in msg_types:
            subs = self.subscriber_group.get(msg_type)
            if subs is not None:
                _remove_subscriber(subs, subscriber)

    def consume(self, money: float) -> None:
        """Record a purchase and notify consumption subscribers."""
        self.consume_sum += money
        self._notify(
            MsgType.CONSUME,
            f"尊敬的持卡人{self.holder},您当前消费{money:.2f}元;",
        )

    def send_bill(self) -> None:
        """Notify bill subscribers of the total spent."""
        self._notify(
            MsgType.BILL,
            f"尊敬的持卡人{self.holder},您本月账单已出，消费总额{self.consume_sum:.2f}元;",
        )

    def expire(self) -> None:
        """Notify arrears subscribers that the bill is overdue."""
        self._notify(
            MsgType.EXPIRE,
            f"尊敬的持卡人{self.holder},您本月账单已逾期，请及时还款，总额{self.consume_sum:.2f}元;",
        )

    def _notify(self, msg_type: MsgType, message: str) -> None:
        for sub in self.subscriber_group.get(msg_type, []):
            sub.update(message)


def _remove_subscriber(subscribers: list[Subscriber], to_remove: Subscriber) -> None:
    for i, sub in enumerate(subscribers):
        if sub.name == to_remove.name:
            subscribers[i], subscribers[-1] = subscribers[-1], subscribers[i]
            subscribers.pop()
            return