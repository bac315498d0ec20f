"""Range coalescing for reconciliation notifications.

Consecutive operations of the same kind at contiguous positions are folded
into one range notification.  The reconciler guarantees contiguity: INSERT
and CHANGE runs advance one slot per operation, while REMOVE runs stay on
the same slot because every removal shifts the tail left.  Moves cannot be
expressed as ranges and bypass the buffer.
"""

from __future__ import annotations

from typing import Any

from listdelta.models import Action, PendingRun, RangeOp


class RangeCoalescer:
    """Buffers one :class:`PendingRun` and dispatches it to a consumer.

    Parameters
    ----------
    consumer:
        Object implementing :class:`~listdelta.consumer.ChangeConsumer`.
    """

    __slots__ = ("_consumer", "_pending", "dispatched")

    def __init__(self, consumer: Any) -> None:
        self._consumer = consumer
        self._pending = PendingRun()
        self.dispatched: list[RangeOp] = []

    @property
    def pending(self) -> PendingRun:
        return self._pending

    def push(self, kind: Action, position: int) -> None:
        """Record one operation of *kind* at *position*.

        A change of kind flushes the pending run first.  ``Action.NONE``
        never produces a notification; pushing it acts as a flush marker.
        """
        if kind == Action.MOVE:
            raise ValueError("moves are dispatched through move(), not push()")
        pending = self._pending
        if pending.kind == kind:
            pending.count += 1
            return
        self._dispatch_pending()
        self._pending = PendingRun(kind=kind, start=position, count=1)

    def flush(self) -> None:
        self.push(Action.NONE, -1)

    def move(self, from_index: int, to_index: int) -> None:
        """Flush the pending run, then dispatch a single move."""
        self.flush()
        self._consumer.move_item(from_index, to_index)
        self.dispatched.append(RangeOp(Action.MOVE, from_index, 1, to_index))

    def remove_tail(self, start: int, count: int) -> None:
        """Dispatch an uncoalesced removal of *count* items from *start*."""
        self._consumer.remove_range(start, count)
        self.dispatched.append(RangeOp(Action.REMOVE, start, count))

    def _dispatch_pending(self) -> None:
        pending = self._pending
        if pending.kind == Action.INSERT:
            self._consumer.insert_range(pending.start, pending.count)
        elif pending.kind == Action.CHANGE:
            self._consumer.change_range(pending.start, pending.count)
        elif pending.kind == Action.REMOVE:
            self._consumer.remove_range(pending.start, pending.count)
        else:
            return
        self.dispatched.append(RangeOp(pending.kind, pending.start, pending.count))
