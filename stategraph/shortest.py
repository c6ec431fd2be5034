# stategraph/shortest.py
"""
Shortest path (fewest events) to every reachable configuration.

All edges weigh 1.  The solver relaxes edges out of a FIFO queue: each
key is queued once, expanded in the order it was first reached,
and then leaves the queue for good.  With uniform weights the first
settled weight of a key is already minimal, so nothing is revisited.

Ties between equal-weight predecessors go to whichever relaxation happened
first, which depends on the adjacency map's iteration order (the order the
explorer discovered edges in).  No lexical ordering of events is implied.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from .adjacency import get_adjacency_map, has_declared_states
from .options import ExplorationOptions, resolve_options
from .paths import AdjacencyMap, PathsIndex, Segment, StatePath, StatePaths
from .protocols import MachineProtocol

logger = logging.getLogger(__name__)

# weight, predecessor state key, predecessor event key
_Relaxation = Tuple[int, Optional[str], Optional[str]]


def shortest_paths_from_adjacency(
    adjacency: AdjacencyMap,
    initial_state: Any,
    state_serializer: Callable[[Any], str],
) -> PathsIndex:
    """Compute one minimum-weight path per key of *adjacency*."""
    initial_key = state_serializer(initial_state)
    weights: Dict[str, _Relaxation] = {initial_key: (0, None, None)}
    states: Dict[str, Any] = {initial_key: initial_state}

    queue = deque([initial_key])
    queued = {initial_key}

    while queue:
        vertex = queue.popleft()
        weight = weights[vertex][0]
        for event_key, entry in adjacency.get(vertex, {}).items():
            next_vertex = state_serializer(entry.state)
            states[next_vertex] = entry.state
            known = weights.get(next_vertex)
            if known is None or known[0] > weight + 1:
                weights[next_vertex] = (weight + 1, vertex, event_key)
            if next_vertex not in queued:
                queued.add(next_vertex)
                queue.append(next_vertex)

    paths: PathsIndex = {}
    for key in weights:
        path = _build_path(key, weights, states, adjacency)
        paths[key] = StatePaths(state=states[key], paths=[path])

    logger.debug("shortest paths computed for %d configurations", len(paths))
    return paths


def _build_path(
    key: str,
    weights: Mapping[str, _Relaxation],
    states: Mapping[str, Any],
    adjacency: AdjacencyMap,
) -> StatePath:
    """Walk predecessor links from *key* back to the initial configuration."""
    segments = []
    cursor = key
    while True:
        _, prev_key, event_key = weights[cursor]
        if prev_key is None:
            break
        entry = adjacency[prev_key][event_key]
        segments.append(Segment(state=states[prev_key], event=entry.event))
        cursor = prev_key
    segments.reverse()
    return StatePath.from_segments(states[key], segments)


def get_shortest_paths(
    machine: MachineProtocol,
    options: Union[None, ExplorationOptions, Mapping[str, Any]] = None,
) -> PathsIndex:
    """
    Shortest path from the initial configuration to every reachable one.

    Returns an empty index for a machine that declares no state nodes.

    Raises
    ------
    TransitionError
        Propagated from exploration.
    """
    if not has_declared_states(machine):
        return {}
    opts = resolve_options(options)
    adjacency = get_adjacency_map(machine, opts)
    return shortest_paths_from_adjacency(
        adjacency, machine.initial_state, opts.state_serializer
    )


__all__ = ["get_shortest_paths", "shortest_paths_from_adjacency"]
