# stategraph/serialization.py
"""
Canonical string keys for configurations and events.

Configurations and events are generally unhashable (dicts, lists, context
objects), so the graph layer compares them through string keys.  Two values
are the same vertex / edge label iff their keys are equal.

The encoding is JSON with sorted keys and compact separators over a
normalized form of the value:

  - dataclass instances  → dict of their fields
  - enum members         → their ``value``
  - sets / frozensets    → lists sorted by their own canonical encoding
  - tuples               → lists
  - mapping keys         → ``str(key)``
  - anything else        → ``repr(value)``

so the key does not depend on insertion order and the functions here never
raise for acyclic inputs.

``deserialize_event_key`` is the inverse of ``serialize_event`` only for
JSON-representable payloads.  Anything that went through the ``repr``
fallback, tuples, sets and non-string mapping keys come back in their JSON
shape.  This is a known lossy boundary; callers holding the original event
objects should prefer them over reconstructed ones.
"""

from __future__ import annotations

import dataclasses
import json
from enum import Enum
from typing import Any, Dict, Mapping

_SCALARS = (str, int, float, bool, type(None))


def _normalize(value: Any) -> Any:
    if isinstance(value, _SCALARS):
        return value
    if isinstance(value, Enum):
        return _normalize(value.value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: _normalize(getattr(value, f.name))
            for f in dataclasses.fields(value)
        }
    if isinstance(value, Mapping):
        return {str(k): _normalize(v) for k, v in value.items()}
    if isinstance(value, (set, frozenset)):
        return sorted((_normalize(v) for v in value), key=canonical_json)
    if isinstance(value, (list, tuple)):
        return [_normalize(v) for v in value]
    return repr(value)


def canonical_json(value: Any) -> str:
    """Deterministic JSON encoding of *value* (sorted keys, no whitespace)."""
    return json.dumps(
        _normalize(value),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=repr,
    )


def to_event_object(event: Any) -> Any:
    """Normalize a bare event type (``"GO"``) to an event object."""
    if isinstance(event, (str, int)) and not isinstance(event, bool):
        return {"type": event}
    return event


_STATE_FIELDS = frozenset({"value", "context"})


def _has_extra_fields(state: Any) -> bool:
    if dataclasses.is_dataclass(state) and not isinstance(state, type):
        return any(f.name not in _STATE_FIELDS for f in dataclasses.fields(state))
    return False


def serialize_state(state: Any) -> str:
    """Default configuration key.

    States exposing ``value`` (and optionally ``context``) are keyed as
    ``<value>`` or ``<value> | <context>``.  A dataclass state with fields
    besides those two, and anything without ``value``, is encoded whole.
    """
    if hasattr(state, "value") and not _has_extra_fields(state):
        key = canonical_json(state.value)
        context = getattr(state, "context", None)
        if context is None:
            return key
        return f"{key} | {canonical_json(context)}"
    return canonical_json(state)


def serialize_event(event: Any) -> str:
    """Default event key: the full canonical encoding of the event."""
    return canonical_json(to_event_object(event))


def deserialize_event_key(key: str) -> Dict[str, Any]:
    """Best-effort inverse of :func:`serialize_event`."""
    return json.loads(key)


__all__ = [
    "canonical_json",
    "to_event_object",
    "serialize_state",
    "serialize_event",
    "deserialize_event_key",
]
