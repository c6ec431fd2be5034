# stategraph/simple.py
"""
Every simple path to every reachable configuration.

A simple path never visits the same configuration key twice.  For each key
of the adjacency map the enumerator runs a depth-first search from the
initial configuration that only remembers the keys on the *current* path:
a key is added when the search enters it and removed when it backtracks.
Reaching the target records a path and the search carries on with the
remaining edges, so every route is found.

There is deliberately no cap on path count or depth.  On dense machines the
number of simple paths grows combinatorially; prune the adjacency map with a
``filter`` first if that matters.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, List, Mapping, Tuple, Union

from .adjacency import get_adjacency_map, has_declared_states
from .options import ExplorationOptions, resolve_options
from .paths import AdjacencyEntry, AdjacencyMap, PathsIndex, Segment, StatePath, StatePaths
from .protocols import MachineProtocol

logger = logging.getLogger(__name__)

_FrameT = Tuple[Any, str, Iterator[Tuple[str, AdjacencyEntry]]]


def _simple_paths_to(
    target_key: str,
    adjacency: AdjacencyMap,
    initial_state: Any,
    state_serializer: Callable[[Any], str],
) -> List[StatePath]:
    """Iterative DFS with explicit stack (avoids Python recursion limit)."""
    initial_key = state_serializer(initial_state)
    if initial_key == target_key:
        return [StatePath.empty(initial_state)]

    found: List[StatePath] = []
    on_path = {initial_key}
    segments: List[Segment] = []
    stack: List[_FrameT] = [
        (initial_state, initial_key, iter(adjacency.get(initial_key, {}).items()))
    ]

    while stack:
        state, key, edges = stack[-1]
        item = next(edges, None)
        if item is None:
            stack.pop()
            on_path.discard(key)
            if stack:
                segments.pop()
            continue

        _, entry = item
        next_key = state_serializer(entry.state)
        if next_key in on_path:
            continue

        segment = Segment(state=state, event=entry.event)
        if next_key == target_key:
            found.append(StatePath.from_segments(entry.state, segments + [segment]))
            continue

        segments.append(segment)
        on_path.add(next_key)
        stack.append(
            (entry.state, next_key, iter(adjacency.get(next_key, {}).items()))
        )

    return found


def simple_paths_from_adjacency(
    adjacency: AdjacencyMap,
    initial_state: Any,
    state_serializer: Callable[[Any], str],
) -> PathsIndex:
    """Enumerate all simple paths to every key of *adjacency*."""
    states = {state_serializer(initial_state): initial_state}
    for row in adjacency.values():
        for entry in row.values():
            states.setdefault(state_serializer(entry.state), entry.state)

    paths: PathsIndex = {}
    total = 0
    for target_key in adjacency:
        found = _simple_paths_to(target_key, adjacency, initial_state, state_serializer)
        if not found:
            continue
        paths[target_key] = StatePaths(state=states[target_key], paths=found)
        total += len(found)

    logger.debug(
        "enumerated %d simple paths to %d configurations", total, len(paths)
    )
    return paths


def get_simple_paths(
    machine: MachineProtocol,
    options: Union[None, ExplorationOptions, Mapping[str, Any]] = None,
) -> PathsIndex:
    """
    All simple paths from the initial configuration to every reachable one.

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
    return simple_paths_from_adjacency(
        adjacency, machine.initial_state, opts.state_serializer
    )


def get_simple_paths_as_list(
    machine: MachineProtocol,
    options: Union[None, ExplorationOptions, Mapping[str, Any]] = None,
) -> List[StatePaths]:
    """Same as :func:`get_simple_paths`, without the keys."""
    return list(get_simple_paths(machine, options).values())


__all__ = [
    "get_simple_paths",
    "get_simple_paths_as_list",
    "simple_paths_from_adjacency",
]
