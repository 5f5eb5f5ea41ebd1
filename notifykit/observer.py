"""Abstract observer: the receiving side of an observable."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, Optional, TypeVar

from notifykit.disposable import Disposable
from notifykit.registry import ReceiverKind

if TYPE_CHECKING:
    from notifykit.observable import BaseObservable

T = TypeVar("T")


class AbstractObserver(ABC, Generic[T]):
    """Receives next/error/complete notifications and tracks the one subscription it made itself."""

    receiver_kind = ReceiverKind.OBSERVER

    def __init__(self) -> None:
        self._subscription: Optional[Disposable] = None

    @property
    def subscription(self) -> Optional[Disposable]:
        return self._subscription

    @abstractmethod
    def next(self, value: T) -> None:
        """Handle a value pushed by the observable."""

    @abstractmethod
    def error(self, error: BaseException) -> None:
        """Handle an error reported by the observable."""

    def complete(self) -> None:
        """Handle completion; by default drops the tracked subscription."""
        self.unsubscribe()

    def subscribe(self, observable: "BaseObservable[T]") -> Disposable:
        """
        Subscribe to observable and track the resulting subscription.
        A previously tracked subscription is replaced, not disposed.
        """
        self._subscription = observable.subscribe(self)
        return self._subscription

    def unsubscribe(self) -> None:
        if self._subscription is not None:
            self._subscription.dispose()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
