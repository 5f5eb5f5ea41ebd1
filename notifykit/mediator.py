"""Base mediator: a publisher that also routes messages sent in by participants."""

from typing import Any, Hashable, Optional, Tuple

from notifykit.disposable import Disposable
from notifykit.message import MediatorMessage
from notifykit.publisher import BasePublisher
from notifykit.registry import ReceiverKind, Registration, resolve_kind
from notifykit.subscription import CompositeSubscription, Subscription


class BaseMediator(BasePublisher):
    """
    Routes topical messages between participants, subscribers and observers.

    Participants push (sender, topic, payload) into next(); the mediator hands
    (topic, payload) to every receiver interested in the topic, except the sending
    participant itself. Observers get every message and subscribers their topics,
    whoever sent it. A receiver is registered at most once.

    A mediator can itself be subscribed to another mediator or publisher. It registers
    as an observer, takes every (topic, payload) pair it is handed and republishes it
    to its own receivers.
    """

    receiver_kind = ReceiverKind.OBSERVER

    @property
    def topics(self) -> Tuple[Hashable, ...]:
        """Always empty: a mediator routes every topic rather than filtering its own."""
        return ()

    def subscribe(self, receiver: Any, kind: Optional[ReceiverKind] = None) -> Disposable:
        """
        Register receiver unless it is already registered.

        Participants are linked both ways: the mediator also subscribes itself to the
        participant, and the disposable returned governs that link. When the participant
        was already registered, the result disposes the existing registration and the
        link together.
        """
        kind = resolve_kind(receiver, kind)
        handle, registration, added = self._registry.add_unique(receiver, kind)
        if added:
            self._on_subscribe(receiver, kind)
            if kind is ReceiverKind.PARTICIPANT:
                return receiver.subscribe(self)
            return Subscription(self._registry, handle)

        if registration.kind is not kind:
            self._logger.warning(
                "kind_ignored",
                extra={
                    "receiver": repr(receiver),
                    "registered": registration.kind.value,
                    "requested": kind.value,
                },
            )
        local = Subscription(self._registry, handle)
        if registration.kind is ReceiverKind.PARTICIPANT:
            return CompositeSubscription(local, receiver.subscribe(self))
        return local

    def next(self, value: Tuple[Any, ...]) -> None:
        """
        Route a (sender, topic, payload) message to every eligible receiver but the sender.
        A (topic, payload) pair, as forwarded by an upstream emitter, is republished as is.
        """
        if len(value) == 2:
            self.publish(value)
            return
        message = MediatorMessage(*value)
        routed = message.routed()
        self._fan_out(
            "next",
            lambda registration: registration.receiver.next(routed),
            lambda registration: self._accepts_from(registration, message),
        )

    def error(self, error: BaseException) -> None:
        """Report an error sent to this mediator; it is logged, not fanned out."""
        self._metrics.increment("errors")
        self._logger.error(
            "mediator_error",
            extra={"error": str(error), "error_type": type(error).__name__},
            exc_info=(type(error), error, error.__traceback__),
        )

    def _accepts_from(self, registration: Registration, message: MediatorMessage) -> bool:
        if not self._accepts(registration, message.topic):
            return False
        if registration.kind is ReceiverKind.PARTICIPANT:
            return registration.receiver.participant_id != message.sender
        return True
