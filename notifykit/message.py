"""Message shapes routed by publishers and mediators."""

from typing import Any, Hashable, NamedTuple


class TopicMessage(NamedTuple):
    """A (topic, payload) pair delivered by publishers and mediators to their receivers."""

    topic: Hashable
    payload: Any


class MediatorMessage(NamedTuple):
    """A (sender, topic, payload) triple sent by a participant into a mediator."""

    sender: Any
    topic: Hashable
    payload: Any

    def routed(self) -> TopicMessage:
        """Drop the sender, giving the shape receivers are handed."""
        return TopicMessage(self.topic, self.payload)
