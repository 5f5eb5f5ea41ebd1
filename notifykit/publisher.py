"""Base publisher: an observable whose messages carry a topic."""

from typing import Any, Hashable, Optional, Tuple

from notifykit.message import TopicMessage
from notifykit.observable import BaseObservable
from notifykit.registry import ReceiverKind, Registration, resolve_kind
from notifykit.subscription import Subscription


class BasePublisher(BaseObservable[TopicMessage]):
    """
    Publishes (topic, payload) messages. Subscribers and participants receive a message
    only when its topic is in their topics; plain observers receive every message.
    Errors and completion are channel-wide and reach every receiver.
    """

    def subscribe(self, receiver: Any, kind: Optional[ReceiverKind] = None) -> Subscription:
        """Register receiver under kind (default: its declared receiver_kind)."""
        return self._register(receiver, resolve_kind(receiver, kind))

    def publish(self, message: Tuple[Hashable, Any]) -> None:
        """Deliver the (topic, payload) message to every receiver interested in its topic."""
        message = TopicMessage(*message)
        self._metrics.increment("published")
        self._fan_out(
            "next",
            lambda registration: registration.receiver.next(message),
            lambda registration: self._accepts(registration, message.topic),
        )

    def _accepts(self, registration: Registration, topic: Hashable) -> bool:
        """Topic filter: observers take everything, the other kinds only their own topics."""
        if registration.kind is ReceiverKind.OBSERVER:
            return True
        return topic in registration.receiver.topics
