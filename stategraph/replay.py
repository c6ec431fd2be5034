# stategraph/replay.py
"""
Reproduce an explicit event sequence as a single path.

The replayer explores the machine with exactly the supplied events
registered as candidates (grouped by type), then walks the sequence from the
initial configuration.  Each step must match a recorded edge; the first one
that does not raises :class:`~stategraph.errors.UnmatchedEventError` and no
partial path is returned.

Event types that are enabled somewhere but absent from the sequence are
still tried in their bare ``{"type": ...}`` form while exploring, so the
restricted adjacency map can be larger than the path itself.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Sequence, Union

from .adjacency import get_adjacency_map, has_declared_states
from .errors import UnmatchedEventError
from .options import ExplorationOptions, resolve_options
from .paths import Segment, StatePath
from .protocols import MachineProtocol
from .serialization import to_event_object

logger = logging.getLogger(__name__)


def _group_by_type(events: Sequence[Any]) -> Dict[str, List[Any]]:
    grouped: Dict[str, List[Any]] = {}
    for event in events:
        grouped.setdefault(event["type"], []).append(event)
    return grouped


def get_path_from_events(
    machine: MachineProtocol,
    events: Sequence[Any],
    options: Union[None, ExplorationOptions, Mapping[str, Any]] = None,
) -> StatePath:
    """
    Build the path the machine takes when fed *events* in order.

    Parameters
    ----------
    machine :
        Anything satisfying :class:`~stategraph.protocols.MachineProtocol`.
    events :
        Events (or bare event types) to replay.
    options :
        ``filter`` and serializers are honoured; ``events`` is replaced by
        the sequence itself.

    Raises
    ------
    UnmatchedEventError
        An event has no edge from the configuration reached so far.
    TransitionError
        Propagated from exploration.
    """
    normalized = [to_event_object(event) for event in events]
    opts = resolve_options(options).replace(events=_group_by_type(normalized))

    if not has_declared_states(machine):
        return StatePath.empty(machine.initial_state)

    adjacency = get_adjacency_map(machine, opts)

    state = machine.initial_state
    state_key = opts.state_serializer(state)
    segments: List[Segment] = []
    for event in normalized:
        event_key = opts.event_serializer(event)
        entry = adjacency.get(state_key, {}).get(event_key)
        if entry is None:
            logger.debug("replay stopped at %s: no edge for %s", state_key, event_key)
            raise UnmatchedEventError(state_key, event_key, state=state, event=event)
        segments.append(Segment(state=state, event=event))
        state = entry.state
        state_key = opts.state_serializer(state)

    return StatePath.from_segments(state, segments)


__all__ = ["get_path_from_events"]
