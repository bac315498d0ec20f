"""Consumers of reconciliation notifications.

:class:`ChangeConsumer` is the interface the reconciler talks to.  Two
ready-made implementations are provided:

* :class:`RecordingConsumer` keeps every notification as a
  :class:`~listdelta.models.RangeOp`.
* :class:`MirrorList` keeps a plain Python list in sync with the values
  it is given, applying notifications with list-splice semantics.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from listdelta.config import ListDeltaConfig
from listdelta.errors import require
from listdelta.models import Action, RangeOp
from listdelta.reconciler import Reconciler

T = TypeVar("T")


@runtime_checkable
class ChangeConsumer(Protocol):
    """Receiver of range notifications.

    Positions refer to the consumer's list as it stands when the call is
    made, after every earlier notification of the same pass was applied.
    """

    def insert_range(self, start: int, count: int) -> None:
        """*count* new items now occupy ``start .. start + count - 1``."""
        ...

    def change_range(self, start: int, count: int) -> None:
        """The items at ``start .. start + count - 1`` changed content."""
        ...

    def remove_range(self, start: int, count: int) -> None:
        """The *count* items from *start* onwards are gone."""
        ...

    def move_item(self, from_index: int, to_index: int) -> None:
        """The item at *from_index* is removed and reinserted at *to_index*."""
        ...


class RecordingConsumer:
    """Consumer that records every notification in :attr:`ops`."""

    def __init__(self) -> None:
        self.ops: list[RangeOp] = []

    def insert_range(self, start: int, count: int) -> None:
        self.ops.append(RangeOp(Action.INSERT, start, count))

    def change_range(self, start: int, count: int) -> None:
        self.ops.append(RangeOp(Action.CHANGE, start, count))

    def remove_range(self, start: int, count: int) -> None:
        self.ops.append(RangeOp(Action.REMOVE, start, count))

    def move_item(self, from_index: int, to_index: int) -> None:
        self.ops.append(RangeOp(Action.MOVE, from_index, 1, to_index))

    def clear(self) -> None:
        self.ops.clear()


class MirrorList(Generic[T]):
    """A list of domain values kept up to date through reconciliation.

    Inserted and changed positions take the incoming values; positions
    that are left alone keep the value they already held, which is equal
    to the incoming one as far as the comparator is concerned.

    Parameters
    ----------
    comparator:
        Comparator for the domain values.
    config:
        Engine configuration passed to the owned :class:`Reconciler`.

    Example::

        mirror = MirrorList(KeyedComparator(key=lambda row: row["id"]))
        mirror.update(rows)
        assert mirror.items == rows
    """

    def __init__(self, comparator: Any, config: ListDeltaConfig | None = None) -> None:
        self._reconciler: Reconciler[T, Any] = Reconciler(comparator, config)
        self._incoming: list[T] = []
        self.items: list[T] = []

    @property
    def reconciler(self) -> Reconciler[T, Any]:
        return self._reconciler

    def update(self, values: Iterable[T], force_full: bool = False) -> None:
        """Reconcile against *values* and apply the notifications to :attr:`items`."""
        self._incoming = list(require(values, "values"))
        try:
            self._reconciler.reconcile(self, self._incoming, force_full)
        finally:
            self._incoming = []

    def insert_range(self, start: int, count: int) -> None:
        self.items[start:start] = self._incoming[start:start + count]

    def change_range(self, start: int, count: int) -> None:
        self.items[start:start + count] = self._incoming[start:start + count]

    def remove_range(self, start: int, count: int) -> None:
        del self.items[start:start + count]

    def move_item(self, from_index: int, to_index: int) -> None:
        self.items.insert(to_index, self.items.pop(from_index))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __getitem__(self, index: int) -> T:
        return self.items[index]
