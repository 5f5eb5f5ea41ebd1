"""Helpers for disposing several resources and for scoped use of one."""

from typing import Awaitable, Callable, List, Optional, TypeVar

from notifykit.disposable import Disposable

D = TypeVar("D", bound=Disposable)
R = TypeVar("R")


def dispose(*disposables: Disposable) -> Optional[List[Exception]]:
    """
    Dispose every item, in order, without stopping at the first failure.
    Returns the exceptions raised along the way, or None if none were.
    """
    errors: List[Exception] = []
    for disposable in disposables:
        try:
            disposable.dispose()
        except Exception as e:
            errors.append(e)
    return errors or None


def using(disposable: D, callback: Callable[[D], R]) -> R:
    """Run callback with disposable, then dispose it whether or not the callback raised."""
    try:
        return callback(disposable)
    finally:
        dispose(disposable)


async def using_async(disposable: D, callback: Callable[[D], Awaitable[R]]) -> R:
    """Await callback with disposable, then dispose it whether or not the callback raised."""
    try:
        return await callback(disposable)
    finally:
        dispose(disposable)
