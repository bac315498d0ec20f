"""Data models shared by the reconciler, the coalescer and consumers.

All types are plain dataclasses or enums with no behaviour beyond what is
needed for structural equality and a JSON-friendly representation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Action(str, Enum):
    """Kinds of operation produced by a reconciliation pass."""

    NONE = "none"
    """Flush marker: the item is already in place and unchanged."""

    INSERT = "insert"
    """A new item appears at the position."""

    REMOVE = "remove"
    """The item at the position goes away."""

    CHANGE = "change"
    """The item at the position keeps its identity but its content changed."""

    MOVE = "move"
    """A single item is relocated.  Never batched into a range."""


# ---------------------------------------------------------------------------
# Coalescing state
# ---------------------------------------------------------------------------

@dataclass
class PendingRun:
    """The not-yet-flushed run of same-kind operations.

    Attributes
    ----------
    kind:
        Action shared by every operation in the run.
    start:
        Position of the first operation of the run.
    count:
        Number of operations folded into the run.
    """

    kind: Action = Action.NONE
    start: int = 0
    count: int = 0


# ---------------------------------------------------------------------------
# Dispatched notifications
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RangeOp:
    """A notification that was delivered to a consumer.

    For :attr:`Action.MOVE`, ``start`` is the source index, ``to`` the
    destination and ``count`` is always 1.  Range actions leave ``to`` as
    ``None``.
    """

    action: Action
    start: int
    count: int = 1
    to: int | None = None

    def to_dict(self) -> dict:
        data: dict = {"action": self.action.value, "start": self.start, "count": self.count}
        if self.to is not None:
            data["to"] = self.to
        return data
