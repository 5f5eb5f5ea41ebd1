"""Subscriptions: revocable handles for one registration with one emitter."""

from notifykit.disposable import Disposable
from notifykit.registry import ReceiverRegistry


class Subscription(Disposable):
    """Releases exactly one slot of one registry. Disposed once that slot is gone, however it went."""

    def __init__(self, registry: ReceiverRegistry, handle: int) -> None:
        self._registry = registry
        self._handle = handle

    @property
    def handle(self) -> int:
        return self._handle

    @property
    def is_disposed(self) -> bool:
        return not self._registry.is_live(self._handle)

    def dispose(self) -> None:
        self._registry.release(self._handle)

    def __repr__(self) -> str:
        return f"Subscription(handle={self._handle}, disposed={self.is_disposed})"


class CompositeSubscription(Disposable):
    """Disposes several disposables together; disposed only when all of them are."""

    def __init__(self, *parts: Disposable) -> None:
        self._parts = parts

    @property
    def parts(self) -> tuple:
        return self._parts

    @property
    def is_disposed(self) -> bool:
        return all(part.is_disposed for part in self._parts)

    def dispose(self) -> None:
        for part in self._parts:
            part.dispose()

    def __repr__(self) -> str:
        return f"CompositeSubscription(parts={len(self._parts)}, disposed={self.is_disposed})"
