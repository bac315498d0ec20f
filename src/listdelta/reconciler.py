"""Reconciler: turn a new snapshot into range notifications.

The reconciler remembers the comparison items the consumer currently
displays.  Each call to :meth:`Reconciler.reconcile` derives the new items,
walks them left to right against a working copy of the old snapshot, and
emits insert / remove / change / move notifications that bring the
consumer's list in line with the new items.

The walk is a linear-offset heuristic, not an LCS-optimal diff: an item
found later in the old list is either moved forward (when the item it
displaces is still wanted further on) or the displaced item is removed.
"""

from __future__ import annotations

import json
import sys
import time
from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any, Generic, TypeVar

from listdelta.coalescer import RangeCoalescer
from listdelta.comparator import Comparator
from listdelta.config import ListDeltaConfig
from listdelta.errors import require
from listdelta.models import Action, RangeOp
from listdelta.observability import NoopMetricsHook, get_logger

T = TypeVar("T")
H = TypeVar("H")


class Reconciler(Generic[T, H]):
    """Stateful engine holding the last-known snapshot.

    Parameters
    ----------
    comparator:
        A :class:`~listdelta.comparator.Comparator` for the domain type.
    config:
        Engine configuration.  Defaults to ``ListDeltaConfig()``.

    Raises
    ------
    ListDeltaInvalidArgumentError
        If *comparator* is ``None``.
    """

    def __init__(
        self,
        comparator: Comparator[T, H],
        config: ListDeltaConfig | None = None,
    ) -> None:
        self._comparator = require(comparator, "comparator")
        self._config = config if config is not None else ListDeltaConfig()
        self._metrics = (
            self._config.metrics if self._config.metrics is not None else NoopMetricsHook()
        )
        self._log = get_logger(f"{self._config.log_name}.reconciler")
        self._snapshot: tuple[H, ...] = ()

    @property
    def snapshot(self) -> tuple[H, ...]:
        """Comparison items the consumer is assumed to display."""
        return self._snapshot

    def reset(self) -> None:
        """Forget the stored snapshot without notifying anyone."""
        self._snapshot = ()

    def reconcile(
        self,
        consumer: Any,
        values: Iterable[T],
        force_full: bool = False,
    ) -> None:
        """Inform *consumer* about the changes between the snapshot and *values*.

        Parameters
        ----------
        consumer:
            Receives ``insert_range``, ``change_range``, ``remove_range``
            and ``move_item`` calls, in order, inline during the pass.
        values:
            The new domain values, in presentation order.
        force_full:
            Treat every item that stays in place as changed, regardless of
            :meth:`Comparator.is_unchanged`.

        Raises
        ------
        ListDeltaInvalidArgumentError
            If *consumer* or *values* is ``None``.  Nothing is derived,
            notified or stored in that case.
        """
        require(consumer, "consumer")
        require(values, "values")

        started = time.monotonic()
        derive = self._comparator.derive
        new_items = [derive(value) for value in values]
        old_size = len(self._snapshot)

        dispatched = self._merge(consumer, new_items, force_full)
        self._snapshot = tuple(new_items)

        self._report(dispatched, old_size, len(new_items), force_full, started)

    # ------------------------------------------------------------------
    # Merge
    # ------------------------------------------------------------------

    def _merge(
        self,
        consumer: Any,
        new_items: list[H],
        force_full: bool,
    ) -> list[RangeOp]:
        comparator = self._comparator
        working = list(self._snapshot)
        ops = RangeCoalescer(consumer)

        offset = 0
        cursor = 0
        while cursor < len(new_items):
            item = new_items[cursor]
            i = self._index_of(working, offset, item)

            if i < 0:
                ops.push(Action.INSERT, offset)
                working.insert(offset, item)
                offset += 1
                cursor += 1

            elif i == offset:
                if force_full or not comparator.is_unchanged(working[offset], item):
                    ops.push(Action.CHANGE, offset)
                else:
                    ops.push(Action.NONE, -1)
                offset += 1
                cursor += 1

            elif self._exists_after(new_items, cursor + 1, working[offset]):
                # The displaced item is wanted later: bring the match forward.
                ops.move(i, offset)
                if force_full or not comparator.is_unchanged(working[i], item):
                    ops.push(Action.CHANGE, offset)
                working.insert(offset, working.pop(i))
                offset += 1
                cursor += 1

            else:
                # Re-examine the same item against the shifted list.
                ops.push(Action.REMOVE, offset)
                working.pop(offset)

        ops.flush()

        excess = len(working) - len(new_items)
        if excess > 0:
            ops.remove_tail(offset, excess)
            working.clear()

        return ops.dispatched

    def _index_of(self, working: Sequence[H], start: int, item: H) -> int:
        matches = self._comparator.matches
        for i in range(start, len(working)):
            if matches(working[i], item):
                return i
        return -1

    def _exists_after(self, new_items: Sequence[H], start: int, old: H) -> bool:
        matches = self._comparator.matches
        return any(matches(old, new_items[k]) for k in range(start, len(new_items)))

    # ------------------------------------------------------------------
    # Observability
    # ------------------------------------------------------------------

    def _report(
        self,
        dispatched: list[RangeOp],
        old_size: int,
        new_size: int,
        force_full: bool,
        started: float,
    ) -> None:
        elapsed_ms = (time.monotonic() - started) * 1000.0
        _emit_reconcile_metrics(self._metrics, dispatched, new_size, force_full, elapsed_ms)

        self._log.debug(
            "reconcile complete",
            extra={"extra_fields": {
                "old_size": old_size,
                "new_size": new_size,
                "force_full": force_full,
                "ops": len(dispatched),
            }},
        )

        if self._config.debug_dump_ops:
            print(
                "[listdelta] Dispatched operations:",
                json.dumps([op.to_dict() for op in dispatched], indent=2),
                file=sys.stderr,
            )


def _emit_reconcile_metrics(
    metrics: Any,
    dispatched: list[RangeOp],
    snapshot_size: int,
    force_full: bool,
    elapsed_ms: float,
) -> None:
    """Emit per-pass counters, the pass duration and the snapshot size."""
    metrics.increment(
        "listdelta.reconcile_total", tags={"force_full": str(force_full).lower()},
    )
    action_counts: Counter[str] = Counter(op.action.value for op in dispatched)
    for action, count in action_counts.items():
        metrics.increment("listdelta.ops_total", count, tags={"action": action})
    metrics.timing("listdelta.reconcile_duration_ms", elapsed_ms)
    metrics.gauge("listdelta.snapshot_size", float(snapshot_size))
