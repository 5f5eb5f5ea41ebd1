"""Exceptions raised by the notification and disposal layers."""

from typing import Optional

DEFAULT_DISPOSED_MESSAGE = "An operation was attempted on a disposed object."


class ObjectDisposedError(RuntimeError):
    """Raised when an operation is attempted on an object that has been disposed."""

    code = 0x40

    def __init__(self, message: Optional[str] = None, *, object_name: Optional[str] = None) -> None:
        if not message:
            message = (
                f"An operation was attempted on a disposed object, {object_name}."
                if object_name
                else DEFAULT_DISPOSED_MESSAGE
            )
        super().__init__(message)
        self.message = message
        self.object_name = object_name


class ReceiverKindError(TypeError):
    """Raised when a receiver is registered under a kind it cannot honour."""

    def __init__(self, receiver: object, kind: object, missing: str) -> None:
        super().__init__(
            f"{type(receiver).__name__} cannot be registered as {kind}: missing {missing!r}"
        )
        self.receiver = receiver
        self.kind = kind
        self.missing = missing
