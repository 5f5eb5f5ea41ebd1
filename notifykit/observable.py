"""Base observable: an emitter that fans values, errors and completion out to its observers."""

from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, TypeVar

from notifykit.observability import Metrics, get_logger
from notifykit.registry import ReceiverKind, ReceiverRegistry, Registration
from notifykit.subscription import Subscription

if TYPE_CHECKING:
    from notifykit.observer import AbstractObserver

T = TypeVar("T")


class BaseObservable(Generic[T]):
    """
    Holds observers in registration order and pushes notifications to them synchronously.

    Every pass works on a snapshot of the registrations and re-checks each slot before
    delivering, so an observer that unsubscribes itself (or a peer) during a pass neither
    skips a pending observer nor gets a second call. Observers added during a pass are
    first notified on the next one. Exceptions raised by observers are not caught.
    """

    def __init__(self, metrics: Optional[Metrics] = None) -> None:
        self._registry = ReceiverRegistry()
        self._metrics = metrics if metrics is not None else Metrics()
        self._logger = get_logger(f"notifykit.{self.__class__.__name__}")

    @property
    def metrics(self) -> Metrics:
        return self._metrics

    @property
    def observer_count(self) -> int:
        return len(self._registry)

    def subscribe(self, observer: "AbstractObserver[T]") -> Subscription:
        """Register observer (no duplicate check) and return the subscription for that registration."""
        return self._register(observer, ReceiverKind.OBSERVER)

    def publish(self, value: T) -> None:
        """Push value to every subscribed observer."""
        self._metrics.increment("published")
        self._fan_out("next", lambda registration: registration.receiver.next(value))

    def _on_error(self, error: BaseException) -> None:
        """Notify every subscribed observer that an error occurred."""
        self._metrics.increment("errors")
        self._fan_out("error", lambda registration: registration.receiver.error(error))

    def complete(self) -> None:
        """Notify every subscribed observer of completion, then drop all registrations."""
        self._fan_out("complete", lambda registration: registration.receiver.complete())
        released = self._registry.clear()
        self._metrics.increment("completed")
        self._metrics.set_gauge("receivers", 0)
        self._logger.info("completed", extra={"released": released})

    def _register(self, receiver: Any, kind: ReceiverKind) -> Subscription:
        handle = self._registry.add(receiver, kind)
        self._on_subscribe(receiver, kind)
        return Subscription(self._registry, handle)

    def _on_subscribe(self, receiver: Any, kind: ReceiverKind) -> None:
        """Called after a new registration (for observability)."""
        self._metrics.increment("subscribed")
        self._metrics.set_gauge("receivers", len(self._registry))
        self._logger.debug(
            "subscribed",
            extra={"receiver": repr(receiver), "kind": kind.value},
        )

    def _fan_out(
        self,
        notification: str,
        deliver: Callable[[Registration], None],
        accepts: Optional[Callable[[Registration], bool]] = None,
    ) -> int:
        """Deliver to every registration still live when reached (and accepted); returns the count."""
        registrations = self._registry.snapshot()
        self._metrics.set_gauge("receivers", len(registrations))
        self._logger.debug(
            "delivering",
            extra={"notification": notification, "receiver_count": len(registrations)},
        )
        delivered = 0
        for handle, registration in registrations:
            if not self._registry.is_live(handle):
                continue
            if accepts is not None and not accepts(registration):
                continue
            deliver(registration)
            delivered += 1
        if notification == "next":
            self._metrics.increment("delivered", delivered)
        return delivered

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(observers={len(self._registry)})"
