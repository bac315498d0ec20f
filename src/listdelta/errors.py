"""Error hierarchy for listdelta.

Every public error class inherits from :class:`ListDeltaError`.  Each
carries a machine-readable ``code`` (from :class:`ErrorCode`), a
human-readable ``message``, an optional structured ``context`` dict, and an
optional ``cause`` (chained exception).

The reconciliation algorithm itself never raises: the only failures are
precondition violations detected before a pass mutates anything.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error the engine can raise."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class ListDeltaError(Exception):
    """Base exception for all listdelta errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Precondition errors
# ---------------------------------------------------------------------------

class ListDeltaInvalidArgumentError(ListDeltaError):
    """A required argument was missing or unusable.

    Context keys: ``argument``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ARGUMENT,
            message=message,
            context=context,
            cause=cause,
        )


def require(value: Any, argument: str) -> Any:
    """Return *value*, raising :class:`ListDeltaInvalidArgumentError` if it is ``None``."""
    if value is None:
        raise ListDeltaInvalidArgumentError(
            f"{argument} must not be None",
            context={"argument": argument},
        )
    return value
