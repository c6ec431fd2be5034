# stategraph/options.py
"""
Knobs that control exploration.

Callers set these to express very different goals:

  - test generation with payloads: ``events={"SUBMIT": [{"type": "SUBMIT",
    "value": ""}, {"type": "SUBMIT", "value": "x"}]}``
  - bounding an unbounded machine: ``filter=lambda s: s.context["count"] < 5``
  - custom equality: ``state_serializer=lambda s: s.value``

These hooks are the only termination control the explorer has.  It never
applies an implicit depth or size cap.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from .errors import OptionsError
from .serialization import serialize_event, serialize_state

EventSource = Union[Sequence[Any], Callable[[Any], Sequence[Any]]]


@dataclass(frozen=True)
class ExplorationOptions:
    """
    Options recognized by every exploration entry point.

    events:
        Event type → either a fixed list of events to try, or a callable
        ``state -> list of events``.  Types missing here are tried once as
        the bare ``{"type": <type>}`` event.
    filter:
        Predicate over the resulting configuration.  Rejected
        configurations get no edge and are not explored.  ``None`` accepts
        everything.
    state_serializer / event_serializer:
        Key functions replacing the canonical defaults.
    """
    events: Mapping[str, EventSource] = field(default_factory=dict)
    filter: Optional[Callable[[Any], bool]] = None
    state_serializer: Callable[[Any], str] = serialize_state
    event_serializer: Callable[[Any], str] = serialize_event

    def accepts(self, state: Any) -> bool:
        return self.filter is None or bool(self.filter(state))

    def replace(self, **changes: Any) -> "ExplorationOptions":
        """Return a copy with *changes* applied."""
        return dataclasses.replace(self, **changes)


_FIELD_NAMES = frozenset(f.name for f in dataclasses.fields(ExplorationOptions))


def resolve_options(
    options: Union[None, ExplorationOptions, Mapping[str, Any]] = None,
) -> ExplorationOptions:
    """Merge caller options over the defaults.

    Accepts ``None``, an :class:`ExplorationOptions`, or a plain mapping
    using the same field names.  ``None`` values in a mapping mean "use the
    default".
    """
    if options is None:
        return ExplorationOptions()
    if isinstance(options, ExplorationOptions):
        return options

    unknown = set(options) - _FIELD_NAMES
    if unknown:
        raise OptionsError(unknown)
    return ExplorationOptions(
        **{k: v for k, v in options.items() if v is not None}
    )


__all__ = ["EventSource", "ExplorationOptions", "resolve_options"]
