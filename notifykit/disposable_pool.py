"""A keyed pool of disposables released together."""

from typing import Awaitable, Callable, Dict, List, Mapping, Optional

from notifykit.disposable import AbstractDisposable, Disposable
from notifykit.disposal import dispose
from notifykit.observability import get_logger


class DisposablePool(AbstractDisposable):
    """Groups unrelated disposables under names and disposes all of them with the pool."""

    def __init__(self, resources: Mapping[str, Disposable]) -> None:
        super().__init__()
        self._resources: Optional[Dict[str, Disposable]] = dict(resources)
        self._disposal_errors: List[Exception] = []
        self._logger = get_logger("notifykit.DisposablePool")

    @property
    def resources(self) -> Optional[Dict[str, Disposable]]:
        """A copy of the pooled resources, or None once the pool is disposed."""
        return dict(self._resources) if self._resources is not None else None

    @property
    def disposal_errors(self) -> List[Exception]:
        """Exceptions raised by pooled resources while the pool was disposed."""
        return list(self._disposal_errors)

    def use(self, callback: Callable[[Dict[str, Disposable], "DisposablePool"], None]) -> "DisposablePool":
        """Call callback with the resources and this pool, then dispose the pool."""
        self.assert_not_disposed()
        resources = self.resources
        try:
            if resources is not None:
                callback(resources, self)
        finally:
            self.dispose()
        return self

    async def use_async(
        self,
        callback: Callable[[Dict[str, Disposable], "DisposablePool"], Awaitable[None]],
    ) -> "DisposablePool":
        """Await callback with the resources and this pool, then dispose the pool."""
        self.assert_not_disposed()
        resources = self.resources
        try:
            if resources is not None:
                await callback(resources, self)
        finally:
            self.dispose()
        return self

    def _on_dispose(self) -> None:
        for name, resource in (self._resources or {}).items():
            for error in dispose(resource) or ():
                self._disposal_errors.append(error)
                self._logger.warning(
                    "disposal_failed",
                    extra={"resource": name, "error": str(error)},
                )
        self._resources = None
