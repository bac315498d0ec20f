"""Comparator capability used by the reconciler.

A comparator turns each domain value ``T`` into a lightweight comparison
item ``H`` and answers two questions about pairs of items: *is this the
same entity* (:meth:`Comparator.matches`) and *did its content change*
(:meth:`Comparator.is_unchanged`).

Caller contract
---------------
``derive`` must be deterministic within one pass.  ``matches`` must be
reflexive and behave like a single-valued key lookup: when several items
in a sequence share a key, the first one found from the scan position wins.
Neither property is checked at runtime.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Protocol, TypeVar, runtime_checkable

from listdelta.errors import ListDeltaInvalidArgumentError

T = TypeVar("T")
H = TypeVar("H")


@runtime_checkable
class Comparator(Protocol[T, H]):
    """Protocol for the derive / matches / is_unchanged strategy."""

    def derive(self, value: T) -> H:
        """Build the comparison item for *value*."""
        ...

    def matches(self, old: H, new: H) -> bool:
        """Return ``True`` when *old* and *new* are the same logical entity."""
        ...

    def is_unchanged(self, old: H, new: H) -> bool:
        """Return ``True`` when two matching items have identical content."""
        ...


def _identity(value: Any) -> Any:
    return value


class KeyedComparator(Generic[T, H]):
    """Comparator assembled from plain callables.

    Parameters
    ----------
    key:
        Extracts the identity key from a comparison item.  Two items match
        when their keys are equal.
    content:
        Extracts the comparable content.  Defaults to the item itself, so
        two items are unchanged when they compare equal.
    derive:
        Builds the comparison item from a domain value.  Defaults to the
        identity function.

    Example::

        comparator = KeyedComparator(key=lambda row: row["id"])
    """

    __slots__ = ("_content", "_derive", "_key")

    def __init__(
        self,
        key: Callable[[H], Any],
        content: Callable[[H], Any] | None = None,
        derive: Callable[[T], H] | None = None,
    ) -> None:
        if not callable(key):
            raise ListDeltaInvalidArgumentError(
                "key must be callable",
                context={"argument": "key"},
            )
        self._key = key
        self._content = content if content is not None else _identity
        self._derive = derive if derive is not None else _identity

    def derive(self, value: T) -> H:
        return self._derive(value)

    def matches(self, old: H, new: H) -> bool:
        return self._key(old) == self._key(new)

    def is_unchanged(self, old: H, new: H) -> bool:
        return self._content(old) == self._content(new)
