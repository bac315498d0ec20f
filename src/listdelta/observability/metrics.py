"""Metrics hook protocol and no-op default implementation.

The reconciler emits counters, timings and gauges once per pass.  By
default a :class:`NoopMetricsHook` is used so there is zero overhead.
Supply any object satisfying :class:`MetricsHook` through
:class:`~listdelta.config.ListDeltaConfig` to route them to a real backend.

Emitted metric names:

* ``listdelta.reconcile_total``        -- counter, tag ``force_full``
* ``listdelta.ops_total``              -- counter, tag ``action``
* ``listdelta.reconcile_duration_ms``  -- timing
* ``listdelta.snapshot_size``          -- gauge
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    All methods accept an optional *tags* dict whose keys and values are
    strings.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment a counter metric."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration in milliseconds."""
        ...

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Set a gauge metric to an absolute value."""
        ...


class NoopMetricsHook:
    """Default metrics implementation that silently discards all data points."""

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass
