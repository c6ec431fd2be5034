# stategraph/adjacency.py
"""
Exhaustive exploration of a machine's reachable configurations.

The explorer treats the machine as a black box: it only calls
``next_events`` to learn which event types may be enabled and
``transition`` to compute successors.  Configurations are identified by
their serialized key (see :mod:`stategraph.serialization`).

Exploration is depth-first.  A configuration is marked visited (its row in
the adjacency map is created) *before* any successor is explored, which is
what makes cyclic machines terminate.  The walk uses an explicit stack of
frames held by :class:`ExplorationContext`, so its visiting order matches
the recursive formulation while deep machines cannot exhaust the
interpreter's recursion limit.

Edges are recorded only when the filter accepts the target configuration
*and* the target key differs from the source key.  Self-transitions that
leave the configuration unchanged are never materialized.

The explorer does not bound anything.  A machine with an infinite
reachable space (free-form numeric context, say) runs forever unless the
caller restricts it with ``filter`` or ``events``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator, List, Mapping, Optional, Union

from .errors import TransitionError
from .options import ExplorationOptions, resolve_options
from .paths import AdjacencyEntry, AdjacencyMap
from .protocols import MachineProtocol
from .serialization import to_event_object

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


def has_declared_states(machine: Any) -> bool:
    """True unless the machine declares no child state nodes at all."""
    return bool(getattr(machine, "states", None))


@dataclass
class _Frame:
    """A configuration whose candidate events are still being tried."""
    state: Any
    key: str
    pending: Iterator[Any]


class ExplorationContext:
    """
    Mutable state of one exploration run.

    Holds the adjacency map under construction (whose keys double as the
    visited set) and the stack of frames still being expanded.  A context is
    created per call and discarded with it.
    """

    def __init__(self, machine: MachineProtocol, options: ExplorationOptions) -> None:
        self.machine = machine
        self.options = options
        self.adjacency: AdjacencyMap = {}
        self.stack: List[_Frame] = []
        self.transitions_tried = 0

    # -- Queries ---------------------------------------------------------

    def is_visited(self, key: str) -> bool:
        return key in self.adjacency

    @property
    def num_states(self) -> int:
        return len(self.adjacency)

    @property
    def num_edges(self) -> int:
        return sum(len(row) for row in self.adjacency.values())

    def candidate_events(self, state: Any) -> List[Any]:
        """Events to try from *state*, in ``next_events`` order."""
        overrides = self.options.events
        candidates: List[Any] = []
        for event_type in self.machine.next_events(state):
            source = overrides.get(event_type)
            if source is None:
                candidates.append({"type": event_type})
            elif callable(source):
                candidates.extend(source(state))
            else:
                candidates.extend(source)
        return [to_event_object(event) for event in candidates]

    # -- Mutation --------------------------------------------------------

    def enter(self, state: Any) -> str:
        """Mark *state* visited and schedule its candidate events."""
        key = self.options.state_serializer(state)
        self.adjacency[key] = {}
        self.stack.append(_Frame(state, key, iter(self.candidate_events(state))))
        logger.debug("discovered configuration %s (depth %d)", key, len(self.stack) - 1)
        return key

    def step(self) -> None:
        """Try the next candidate event of the top frame."""
        frame = self.stack[-1]
        event = next(frame.pending, _EXHAUSTED)
        if event is _EXHAUSTED:
            self.stack.pop()
            return

        self.transitions_tried += 1
        try:
            next_state = self.machine.transition(frame.state, event)
        except Exception as exc:
            event_key = self.options.event_serializer(event)
            logger.debug("transition failed from %s on %s: %s", frame.key, event_key, exc)
            raise TransitionError(frame.key, event_key, exc) from exc

        if not self.options.accepts(next_state):
            return
        next_key = self.options.state_serializer(next_state)
        if next_key == frame.key:
            return

        event_key = self.options.event_serializer(event)
        self.adjacency[frame.key][event_key] = AdjacencyEntry(state=next_state, event=event)

        if not self.is_visited(next_key):
            self.enter(next_state)

    def run(self, initial_state: Any) -> AdjacencyMap:
        self.enter(initial_state)
        while self.stack:
            self.step()
        logger.info(
            "exploration finished: %d configurations, %d edges, %d transitions tried",
            self.num_states, self.num_edges, self.transitions_tried,
        )
        return self.adjacency


def get_adjacency_map(
    machine: MachineProtocol,
    options: Union[None, ExplorationOptions, Mapping[str, Any]] = None,
    *,
    initial_state: Optional[Any] = None,
) -> AdjacencyMap:
    """
    Explore every configuration reachable from the machine's initial state.

    Parameters
    ----------
    machine :
        Anything satisfying :class:`~stategraph.protocols.MachineProtocol`.
    options :
        ``ExplorationOptions`` or a mapping with the same keys.
    initial_state :
        Start somewhere other than ``machine.initial_state``.

    Returns
    -------
    AdjacencyMap
        ``state key → event key → AdjacencyEntry``.  Always contains the
        initial configuration's key.

    Raises
    ------
    TransitionError
        The machine's ``transition`` raised.  Exploration stops there.
    """
    opts = resolve_options(options)
    start = machine.initial_state if initial_state is None else initial_state
    return ExplorationContext(machine, opts).run(start)


__all__ = ["ExplorationContext", "get_adjacency_map", "has_declared_states"]
