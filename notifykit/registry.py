"""Receiver kinds and the slot table that emitters keep their registrations in."""

import itertools
import threading
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

from notifykit.exceptions import ReceiverKindError


class ReceiverKind(Enum):
    """How an emitter filters deliveries to a registered receiver."""

    OBSERVER = "observer"
    SUBSCRIBER = "subscriber"
    PARTICIPANT = "participant"


def resolve_kind(receiver: Any, kind: Optional[ReceiverKind] = None) -> ReceiverKind:
    """
    Return the kind receiver is registered under: the explicit kind if given,
    else the receiver's declared receiver_kind. An untagged receiver keeps the
    filtering its attributes ask for: PARTICIPANT with participant_id, topics and
    subscribe, SUBSCRIBER with topics, OBSERVER otherwise.
    Raises ReceiverKindError if the receiver lacks what that kind needs.
    """
    if kind is None:
        kind = getattr(receiver, "receiver_kind", None) or _untagged_kind(receiver)
    if kind is not ReceiverKind.OBSERVER and not hasattr(receiver, "topics"):
        raise ReceiverKindError(receiver, kind, "topics")
    if kind is ReceiverKind.PARTICIPANT:
        for attr in ("participant_id", "subscribe"):
            if not hasattr(receiver, attr):
                raise ReceiverKindError(receiver, kind, attr)
    return kind


def _untagged_kind(receiver: Any) -> ReceiverKind:
    if not hasattr(receiver, "topics"):
        return ReceiverKind.OBSERVER
    if hasattr(receiver, "participant_id") and hasattr(receiver, "subscribe"):
        return ReceiverKind.PARTICIPANT
    return ReceiverKind.SUBSCRIBER


class Registration(NamedTuple):
    """One occupied slot: the receiver and the kind it was registered as."""

    receiver: Any
    kind: Optional[ReceiverKind] = None


class ReceiverRegistry:
    """
    Insertion-ordered slot table. Each add() returns a fresh integer handle;
    release() drops that one slot. Handles are never reused, so a released
    handle stays released even if the same receiver is added again.
    """

    def __init__(self) -> None:
        self._slots: Dict[int, Registration] = {}
        self._handles = itertools.count()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._slots)

    def add(self, receiver: Any, kind: Optional[ReceiverKind] = None) -> int:
        """Occupy a new slot with receiver and return its handle."""
        with self._lock:
            handle = next(self._handles)
            self._slots[handle] = Registration(receiver, kind)
            return handle

    def add_unique(self, receiver: Any, kind: Optional[ReceiverKind] = None) -> Tuple[int, Registration, bool]:
        """
        Add receiver unless it already occupies a slot (by identity).
        Returns (handle, registration, added).
        """
        with self._lock:
            for handle, registration in self._slots.items():
                if registration.receiver is receiver:
                    return handle, registration, False
            handle = next(self._handles)
            registration = Registration(receiver, kind)
            self._slots[handle] = registration
            return handle, registration, True

    def find(self, receiver: Any) -> Optional[int]:
        """Handle of the first slot holding receiver, or None."""
        with self._lock:
            for handle, registration in self._slots.items():
                if registration.receiver is receiver:
                    return handle
            return None

    def is_live(self, handle: int) -> bool:
        return handle in self._slots

    def release(self, handle: int) -> bool:
        """Free the slot; returns False if it was already free."""
        with self._lock:
            return self._slots.pop(handle, None) is not None

    def snapshot(self) -> List[Tuple[int, Registration]]:
        """Copy of the occupied slots, oldest first."""
        with self._lock:
            return list(self._slots.items())

    def receivers(self) -> List[Any]:
        with self._lock:
            return [registration.receiver for registration in self._slots.values()]

    def clear(self) -> int:
        """Free every slot; returns how many were occupied."""
        with self._lock:
            count = len(self._slots)
            self._slots.clear()
            return count

    def __repr__(self) -> str:
        return f"ReceiverRegistry(slots={len(self._slots)})"
