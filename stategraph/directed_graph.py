# stategraph/directed_graph.py
"""
Static node/edge view of a machine's declared structure.

Unlike the reachability graph this never runs the machine.  It walks the
declared state-node tree: one :class:`DirectedGraphNode` per state node,
each carrying one :class:`DirectedGraphEdge` per (transition, target) pair
declared on that node.  A transition whose target is ``None`` yields an edge back
to its own node; an empty target list yields no edge.

Filters, ``events`` overrides and reachability play no part here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List

from .protocols import StateNodeProtocol, TransitionDefinitionProtocol


@dataclass(frozen=True)
class EdgeLabel:
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text}


@dataclass
class DirectedGraphEdge:
    """Edge ``source → target`` for one declared transition target."""
    id: str
    source: StateNodeProtocol = field(repr=False)
    target: StateNodeProtocol = field(repr=False)
    transition: TransitionDefinitionProtocol = field(repr=False)
    label: EdgeLabel

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source.id,
            "target": self.target.id,
            "label": self.label.to_dict(),
        }


@dataclass
class DirectedGraphNode:
    """A declared state node with its own edges and exported children."""
    id: str
    state_node: StateNodeProtocol = field(repr=False)
    children: List["DirectedGraphNode"] = field(default_factory=list)
    edges: List[DirectedGraphEdge] = field(default_factory=list)

    def iter_nodes(self) -> Iterator["DirectedGraphNode"]:
        """This node and every descendant, pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def iter_edges(self) -> Iterator[DirectedGraphEdge]:
        for node in self.iter_nodes():
            yield from node.edges

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "children": [child.to_dict() for child in self.children],
            "edges": [edge.to_dict() for edge in self.edges],
        }


def get_children(state_node: StateNodeProtocol) -> List[StateNodeProtocol]:
    """Direct child state nodes, in declaration order."""
    states = getattr(state_node, "states", None)
    if not states:
        return []
    return list(states.values())


def get_state_nodes(state_node: StateNodeProtocol) -> List[StateNodeProtocol]:
    """Every descendant state node (excluding *state_node*), pre-order."""
    nodes: List[StateNodeProtocol] = []
    for child in get_children(state_node):
        nodes.append(child)
        nodes.extend(get_state_nodes(child))
    return nodes


def to_directed_graph(state_node: StateNodeProtocol) -> DirectedGraphNode:
    """Export *state_node* and its declared descendants as a node/edge tree."""
    edges: List[DirectedGraphEdge] = []
    for t_index, transition in enumerate(getattr(state_node, "transitions", ()) or ()):
        targets = [state_node] if transition.target is None else transition.target
        for target_index, target in enumerate(targets):
            edges.append(
                DirectedGraphEdge(
                    id=f"{state_node.id}:{t_index}:{target_index}",
                    source=state_node,
                    target=target,
                    transition=transition,
                    label=EdgeLabel(text=transition.event_type),
                )
            )

    return DirectedGraphNode(
        id=state_node.id,
        state_node=state_node,
        children=[to_directed_graph(child) for child in get_children(state_node)],
        edges=edges,
    )


__all__ = [
    "DirectedGraphEdge",
    "DirectedGraphNode",
    "EdgeLabel",
    "get_children",
    "get_state_nodes",
    "to_directed_graph",
]
