"""Concrete Participant implementation with observability hooks."""

from typing import Any, Hashable, Iterable, Tuple

from notifykit.message import TopicMessage
from notifykit.observability import get_logger
from notifykit.participant import AbstractParticipant


class DefaultParticipant(AbstractParticipant):
    """Participant that logs what it receives and sends (override on_message to reply)."""

    def __init__(self, topics: Iterable[Hashable] = (), name: str = "default") -> None:
        super().__init__(topics)
        self._name = name
        self._logger = get_logger(f"notifykit.participant.{name}")

    @property
    def name(self) -> str:
        return self._name

    def next(self, value: TopicMessage) -> None:
        topic, payload = value
        self._logger.info(
            "message_received",
            extra={"topic": topic, "participant": self._name},
        )
        self.on_message(topic, payload)

    def error(self, error: BaseException) -> None:
        self._logger.error(
            "error_received",
            extra={"participant": self._name, "error": str(error)},
        )

    def publish(self, message: Tuple[Hashable, Any]) -> None:
        self._logger.info(
            "published",
            extra={
                "topic": message[0],
                "participant": self._name,
                "mediators": len(self.mediators),
            },
        )
        super().publish(message)

    def on_message(self, topic: Hashable, payload: Any) -> None:
        """Handle a routed message; may call publish() to answer. The default does nothing."""
