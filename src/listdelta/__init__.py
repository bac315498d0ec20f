"""listdelta — reconcile ordered lists into range notifications.

Public re-exports
-----------------

* **Engine:** :class:`Reconciler`, :class:`RangeCoalescer`
* **Comparators:** :class:`Comparator`, :class:`KeyedComparator`
* **Consumers:** :class:`ChangeConsumer`, :class:`RecordingConsumer`,
  :class:`MirrorList`
* **Configuration:** :class:`ListDeltaConfig`
* **Errors:** :class:`ListDeltaError` and its subclasses, :class:`ErrorCode`
* **Models:** :class:`Action`, :class:`PendingRun`, :class:`RangeOp`

Usage::

    from listdelta import KeyedComparator, RecordingConsumer, Reconciler

    reconciler = Reconciler(KeyedComparator(key=lambda row: row["id"]))
    consumer = RecordingConsumer()
    reconciler.reconcile(consumer, rows)
"""

from __future__ import annotations

# ── Engine ─────────────────────────────────────────────────────────────
from listdelta.coalescer import RangeCoalescer

# ── Comparators ────────────────────────────────────────────────────────
from listdelta.comparator import Comparator, KeyedComparator

# ── Configuration ───────────────────────────────────────────────────────
from listdelta.config import ListDeltaConfig

# ── Consumers ──────────────────────────────────────────────────────────
from listdelta.consumer import ChangeConsumer, MirrorList, RecordingConsumer

# ── Errors ──────────────────────────────────────────────────────────────
from listdelta.errors import ErrorCode, ListDeltaError, ListDeltaInvalidArgumentError

# ── Models ──────────────────────────────────────────────────────────────
from listdelta.models import Action, PendingRun, RangeOp
from listdelta.reconciler import Reconciler

__all__ = [
    "Action",
    "ChangeConsumer",
    "Comparator",
    "ErrorCode",
    "KeyedComparator",
    "ListDeltaConfig",
    "ListDeltaError",
    "ListDeltaInvalidArgumentError",
    "MirrorList",
    "PendingRun",
    "RangeCoalescer",
    "RangeOp",
    "RecordingConsumer",
    "Reconciler",
]
