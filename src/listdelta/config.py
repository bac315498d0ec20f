"""Engine configuration for listdelta.

:class:`ListDeltaConfig` is a plain dataclass capturing the ambient knobs
of a :class:`~listdelta.reconciler.Reconciler`: where metrics go, whether
the dispatched operation stream is dumped for debugging, and which logger
namespace the engine writes to.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from listdelta.observability.metrics import MetricsHook


@dataclass
class ListDeltaConfig:
    """Complete configuration for a reconciler.

    Every parameter has a default, so ``ListDeltaConfig()`` is valid.

    Parameters
    ----------
    metrics:
        Metrics backend satisfying :class:`MetricsHook`.  ``None`` selects
        :class:`~listdelta.observability.NoopMetricsHook`.
    debug_dump_ops:
        Write the notifications dispatched by each pass to *stderr*.
    log_name:
        Root logger name.  The reconciler logs on ``"<log_name>.reconciler"``.
    """

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    log_name: str = "listdelta"

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_ops: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.metrics is not None and not isinstance(self.metrics, MetricsHook):
            raise ValueError(
                f"metrics must implement increment/timing/gauge, got {type(self.metrics).__name__}"
            )
        if not self.log_name:
            raise ValueError("log_name must be a non-empty string")
