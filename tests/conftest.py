"""Shared test fixtures for the listdelta test suite."""

from __future__ import annotations

from typing import Callable

import pytest

from listdelta.comparator import KeyedComparator
from listdelta.consumer import RecordingConsumer
from listdelta.models import Action, RangeOp
from listdelta.reconciler import Reconciler


def _key_of(item: tuple) -> str:
    return item[0]


def apply_ops(old: list, new: list, ops: list[RangeOp]) -> list:
    """Apply recorded notifications to a copy of *old* with splice semantics.

    Inserted and changed slots take the value found at the same position in
    *new*.
    """
    items = list(old)
    for op in ops:
        if op.action == Action.INSERT:
            items[op.start:op.start] = new[op.start:op.start + op.count]
        elif op.action == Action.CHANGE:
            items[op.start:op.start + op.count] = new[op.start:op.start + op.count]
        elif op.action == Action.REMOVE:
            del items[op.start:op.start + op.count]
        elif op.action == Action.MOVE:
            items.insert(op.to, items.pop(op.start))
    return items


@pytest.fixture
def comparator() -> KeyedComparator:
    """Comparator over ``(key, content)`` tuples keyed on the first element."""
    return KeyedComparator(key=_key_of)


@pytest.fixture
def reconciler(comparator: KeyedComparator) -> Reconciler:
    """Reconciler with an empty snapshot and the default config."""
    return Reconciler(comparator)


@pytest.fixture
def consumer() -> RecordingConsumer:
    return RecordingConsumer()


@pytest.fixture
def replay() -> Callable[[list, list, list[RangeOp]], list]:
    """The :func:`apply_ops` oracle, for tests that replay recorded ops."""
    return apply_ops
