"""The disposable contract and a base class for resources with a stored disposed flag."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from notifykit.exceptions import ObjectDisposedError


class Disposable(ABC):
    """Holds a revocable resource. Revocation through dispose() is idempotent."""

    @property
    @abstractmethod
    def is_disposed(self) -> bool:
        """Whether the resource has been released."""

    @abstractmethod
    def dispose(self) -> None:
        """Release the resource. Calling this again must be a no-op."""

    def __enter__(self) -> "Disposable":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.dispose()


def assert_not_disposed(disposable: Disposable, message: Optional[str] = None) -> None:
    """Raise ObjectDisposedError (naming the object's class) if disposable has been disposed."""
    if disposable.is_disposed:
        raise ObjectDisposedError(message, object_name=type(disposable).__name__)


class AbstractDisposable(Disposable):
    """Disposable that tracks its own state and runs _on_dispose() exactly once."""

    def __init__(self) -> None:
        self._is_disposed = False

    @property
    def is_disposed(self) -> bool:
        return self._is_disposed

    def dispose(self) -> None:
        """Free resources once; the object counts as disposed even if _on_dispose raises."""
        if self._is_disposed:
            return
        try:
            self._on_dispose()
        finally:
            self._is_disposed = True

    def assert_not_disposed(self, message: Optional[str] = None) -> None:
        assert_not_disposed(self, message)

    def _on_dispose(self) -> None:
        """Free up resources. Subclasses override."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} is_disposed={self._is_disposed}>"
