# stategraph/paths.py
"""
Result types shared by the explorer and the path solvers.

``AdjacencyMap``
    ``state key → event key → AdjacencyEntry``.  Produced once by
    :func:`stategraph.adjacency.get_adjacency_map` and only read afterwards.
``StatePath``
    Ordered :class:`Segment` s plus the configuration they end in.
``PathsIndex``
    ``state key → StatePaths``.  Shortest-path mode holds exactly one path
    per key, simple-path mode one or more.

These are plain values.  Callers serialize them however they like.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Tuple


@dataclass(frozen=True)
class AdjacencyEntry:
    """An outgoing edge: the event that fires and the configuration it reaches."""
    state: Any
    event: Any


@dataclass(frozen=True)
class Segment:
    """One step of a path: the configuration here and the event fired next."""
    state: Any
    event: Any

    def __str__(self) -> str:
        return f"{self.state} --[{self.event}]-->"


@dataclass(frozen=True)
class StatePath:
    """
    A walk from the initial configuration to ``state``.

    ``weight`` is the number of segments.  A weight-0 path has no segments
    and ends where it starts.
    """
    state: Any
    segments: Tuple[Segment, ...] = ()
    weight: int = 0

    @classmethod
    def empty(cls, state: Any) -> "StatePath":
        """A zero-length path sitting at *state*."""
        return cls(state=state, segments=(), weight=0)

    @classmethod
    def from_segments(cls, state: Any, segments: List[Segment]) -> "StatePath":
        segs = tuple(segments)
        return cls(state=state, segments=segs, weight=len(segs))

    @property
    def events(self) -> Tuple[Any, ...]:
        """The event sequence that drives the machine along this path."""
        return tuple(seg.event for seg in self.segments)

    @property
    def states(self) -> Tuple[Any, ...]:
        """Every configuration visited, in order (length = weight + 1)."""
        return tuple(seg.state for seg in self.segments) + (self.state,)

    def state_keys(self, serializer: Callable[[Any], str]) -> Tuple[str, ...]:
        return tuple(serializer(s) for s in self.states)

    def pretty(self, state_str: Callable[[Any], str] = str) -> str:
        if not self.segments:
            return f"[{state_str(self.state)}]"
        parts = [state_str(self.segments[0].state)]
        for seg, nxt in zip(self.segments, self.states[1:]):
            parts.append(f" --[{seg.event}]--> {state_str(nxt)}")
        return "".join(parts)

    def __len__(self) -> int:
        return self.weight

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)


@dataclass
class StatePaths:
    """A configuration and the paths that reach it."""
    state: Any
    paths: List[StatePath] = field(default_factory=list)


AdjacencyMap = Dict[str, Dict[str, AdjacencyEntry]]
PathsIndex = Dict[str, StatePaths]


__all__ = [
    "AdjacencyEntry",
    "AdjacencyMap",
    "PathsIndex",
    "Segment",
    "StatePath",
    "StatePaths",
]
