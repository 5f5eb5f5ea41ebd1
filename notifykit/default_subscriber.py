"""Concrete Subscriber implementation with observability hooks."""

from typing import Any, Hashable, Iterable

from notifykit.message import TopicMessage
from notifykit.observability import get_logger
from notifykit.subscriber import AbstractSubscriber


class DefaultSubscriber(AbstractSubscriber):
    """Subscriber that logs deliveries and errors (override on_message to process messages)."""

    def __init__(self, topics: Iterable[Hashable] = (), name: str = "default") -> None:
        super().__init__(topics)
        self._name = name
        self._logger = get_logger(f"notifykit.subscriber.{name}")

    @property
    def name(self) -> str:
        return self._name

    def next(self, value: TopicMessage) -> None:
        topic, payload = value
        self._logger.info(
            "message_received",
            extra={
                "topic": topic,
                "subscriber": self._name,
                "payload_type": type(payload).__name__,
            },
        )
        self.on_message(topic, payload)

    def error(self, error: BaseException) -> None:
        self._logger.error(
            "error_received",
            extra={"subscriber": self._name, "error": str(error)},
        )

    def on_message(self, topic: Hashable, payload: Any) -> None:
        """Handle a delivered message. Subclasses override; the default does nothing."""
