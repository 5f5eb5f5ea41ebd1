"""Abstract participant: a subscriber that can also publish into the mediators it is linked to."""

import uuid
from typing import TYPE_CHECKING, Any, Hashable, Iterable, List, Tuple

from notifykit.message import MediatorMessage, TopicMessage
from notifykit.observer import AbstractObserver
from notifykit.registry import ReceiverKind, ReceiverRegistry
from notifykit.subscription import Subscription

if TYPE_CHECKING:
    from notifykit.mediator import BaseMediator


class AbstractParticipant(AbstractObserver[TopicMessage]):
    """
    Receives (topic, payload) messages for its topics from mediators, and publishes
    messages tagged with its participant_id into every linked mediator. A mediator
    never hands a participant back a message that participant sent.

    Each direction is revoked separately: the subscription returned by subscribe()
    drops the outbound link only, the mediator keeps its own registration. Links are
    not tracked as the observer subscription, so complete() from one mediator leaves
    the links to every mediator in place.
    """

    receiver_kind = ReceiverKind.PARTICIPANT

    def __init__(self, topics: Iterable[Hashable] = ()) -> None:
        super().__init__()
        self._topics: Tuple[Hashable, ...] = tuple(topics)
        self._participant_id = uuid.uuid4()
        self._mediators = ReceiverRegistry()

    @property
    def topics(self) -> Tuple[Hashable, ...]:
        return self._topics

    @property
    def participant_id(self) -> uuid.UUID:
        return self._participant_id

    @property
    def mediators(self) -> List["BaseMediator"]:
        """Mediators this participant currently publishes to."""
        return self._mediators.receivers()

    def subscribe(self, mediator: "BaseMediator") -> Subscription:
        """Link to mediator (registering with it as a participant) and return the link's subscription."""
        handle, _, added = self._mediators.add_unique(mediator)
        if added:
            mediator.subscribe(self, ReceiverKind.PARTICIPANT)
        return Subscription(self._mediators, handle)

    def publish(self, message: Tuple[Hashable, Any]) -> None:
        """Send the (topic, payload) message into every linked mediator; no links, no-op."""
        topic, payload = message
        outgoing = MediatorMessage(self._participant_id, topic, payload)
        for handle, registration in self._mediators.snapshot():
            if self._mediators.is_live(handle):
                registration.receiver.next(outgoing)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={str(self._participant_id)[:8]!r}, topics={self._topics!r})"
