# stategraph/protocols.py
"""
Structural typing for the machines this package explores.

Nothing here has to be subclassed.  Any object with the right attributes
qualifies, which keeps the explorer independent of a particular statechart
library.  A machine is also the root of its own declared state-node tree.
"""

from __future__ import annotations

from typing import (
    Any,
    Iterable,
    Mapping,
    Optional,
    Protocol,
    Sequence,
    runtime_checkable,
)

Event = Mapping[str, Any]


@runtime_checkable
class TransitionDefinitionProtocol(Protocol):
    """A transition as declared on a state node."""

    @property
    def event_type(self) -> str:
        """Event type that triggers the transition."""
        ...

    @property
    def target(self) -> Optional[Sequence["StateNodeProtocol"]]:
        """Declared target nodes, or ``None`` for a targetless transition."""
        ...


@runtime_checkable
class StateNodeProtocol(Protocol):
    """A node of the machine's declared (static) structure."""

    @property
    def id(self) -> str: ...

    @property
    def states(self) -> Mapping[str, "StateNodeProtocol"]:
        """Declared child state nodes keyed by their local name."""
        ...

    @property
    def transitions(self) -> Sequence[TransitionDefinitionProtocol]:
        """Transitions declared on this node (not its children)."""
        ...


@runtime_checkable
class MachineProtocol(StateNodeProtocol, Protocol):
    """A deterministic, event-driven state machine."""

    @property
    def initial_state(self) -> Any:
        """The configuration exploration starts from."""
        ...

    def transition(self, state: Any, event: Event) -> Any:
        """Return the configuration reached from *state* on *event*.

        Must be deterministic for the same (state, event) pair.  May raise.
        """
        ...

    def next_events(self, state: Any) -> Iterable[str]:
        """Event types potentially enabled in *state*."""
        ...


__all__ = [
    "Event",
    "MachineProtocol",
    "StateNodeProtocol",
    "TransitionDefinitionProtocol",
]
