"""Abstract subscriber: an observer scoped to a fixed set of topics."""

from typing import Hashable, Iterable, Tuple

from notifykit.message import TopicMessage
from notifykit.observer import AbstractObserver
from notifykit.registry import ReceiverKind


class AbstractSubscriber(AbstractObserver[TopicMessage]):
    """
    Receives (topic, payload) messages for the topics given at construction only.
    The topic set is frozen; a subscriber built with no topics receives nothing.
    """

    receiver_kind = ReceiverKind.SUBSCRIBER

    def __init__(self, topics: Iterable[Hashable] = ()) -> None:
        super().__init__()
        self._topics: Tuple[Hashable, ...] = tuple(topics)

    @property
    def topics(self) -> Tuple[Hashable, ...]:
        return self._topics

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(topics={self._topics!r})"
