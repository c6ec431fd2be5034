# stategraph/errors.py
"""
Error types for graph exploration and path derivation.

Error hierarchy::

    StateGraphError (base)
    ├── TransitionError       - the machine's transition function raised
    ├── UnmatchedEventError   - a replayed event has no recorded edge
    └── OptionsError          - unrecognized exploration options

Error codes follow the pattern ``SG-NNNN``:

  - 1000-1999: exploration errors
  - 2000-2999: replay errors
  - 3000-3999: configuration errors

A machine with no declared state nodes is *not* an error: every operation
returns an empty (or trivial) result for it.

All errors are fatal to the call that raised them.  There is no retry layer
and no partial result; callers that want skip-on-error exploration wrap the
transition function before handing the machine in.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Stable error codes carried by every :class:`StateGraphError`."""

    TRANSITION_FAILED = 1001
    UNMATCHED_EVENT = 2001
    INVALID_OPTIONS = 3001

    @property
    def code(self) -> str:
        """Get the full error code string."""
        return f"SG-{self.value:04d}"

    def __str__(self) -> str:
        return self.code


class StateGraphError(Exception):
    """
    Base exception for all stategraph errors.

    Carries a stable :class:`ErrorCode` plus machine-readable details so
    test generators can report failures without parsing messages.
    """

    default_code: ErrorCode = ErrorCode.TRANSITION_FAILED

    def __init__(
        self,
        message: str,
        code: Optional[ErrorCode] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details: Dict[str, Any] = dict(details or {})

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation of the error."""
        return {
            "code": self.code.code,
            "error": type(self).__name__,
            "message": self.message,
            "details": dict(self.details),
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class TransitionError(StateGraphError):
    """The transition function raised while exploring a (state, event) pair."""

    default_code = ErrorCode.TRANSITION_FAILED

    def __init__(self, state_key: str, event_key: str, cause: BaseException) -> None:
        super().__init__(
            f"Unable to transition from state {state_key} "
            f"on event {event_key}: {cause}",
            details={
                "state": state_key,
                "event": event_key,
                "cause": type(cause).__name__,
            },
        )
        self.state_key = state_key
        self.event_key = event_key


class UnmatchedEventError(StateGraphError):
    """A replayed event has no outgoing edge from the current configuration."""

    default_code = ErrorCode.UNMATCHED_EVENT

    def __init__(
        self,
        state_key: str,
        event_key: str,
        state: Any = None,
        event: Any = None,
    ) -> None:
        super().__init__(
            f"Invalid transition from {state_key} with {event_key}",
            details={"state": state_key, "event": event_key},
        )
        self.state_key = state_key
        self.event_key = event_key
        # configuration the replay was in, and the event it could not follow
        self.state = state
        self.event = event


class OptionsError(StateGraphError, ValueError):
    """Exploration options contained keys the explorer does not recognize."""

    default_code = ErrorCode.INVALID_OPTIONS

    def __init__(self, unknown: Any) -> None:
        names = sorted(str(u) for u in unknown)
        super().__init__(
            f"Unknown exploration option(s): {', '.join(names)}",
            details={"unknown": names},
        )
        self.unknown = names


__all__ = [
    "ErrorCode",
    "StateGraphError",
    "TransitionError",
    "UnmatchedEventError",
    "OptionsError",
]
