"""
stategraph — Reachability Graphs and Test Paths for Event-Driven State Machines
===============================================================================

This package explores the reachable configuration space of a deterministic,
event-driven state machine and derives the artifacts model-based testing and
visualization tools need.

Core modules
------------
serialization
    Canonical string keys for configurations and events.
options
    ``ExplorationOptions``: event overrides, filters and serializer hooks.
adjacency
    Exhaustive exploration producing the adjacency map.
shortest
    Minimum edge-count path to every reachable configuration.
simple
    Every cycle-free path to every reachable configuration.
replay
    One concrete path reproducing an explicit event sequence.
directed_graph
    Static node/edge tree of the machine's declared structure.
errors
    ``StateGraphError`` hierarchy with stable error codes.

Quick start
-----------
>>> from stategraph import get_shortest_paths
>>> paths = get_shortest_paths(machine)
>>> for key, entry in paths.items():
...     print(key, entry.paths[0].weight)

Package layout
--------------
::

    stategraph/
    ├── __init__.py            ← this file
    ├── protocols.py
    ├── errors.py
    ├── serialization.py
    ├── options.py
    ├── paths.py
    ├── adjacency.py
    ├── shortest.py
    ├── simple.py
    ├── replay.py
    └── directed_graph.py
"""

from __future__ import annotations

import importlib
import logging
import sys
from typing import TYPE_CHECKING, List

# ---------------------------------------------------------------------------
# Package metadata
# ---------------------------------------------------------------------------

__version__ = "0.1.0"
__author__ = "stategraph contributors"
__license__ = "MIT"
__all__: List[str] = []          # populated incrementally below

_log = logging.getLogger(__name__)
_log.addHandler(logging.NullHandler())

# ---------------------------------------------------------------------------
# Internal registry: (module_name, list_of_names_to_import)
# ---------------------------------------------------------------------------

_CORE_MODULES = {
    "errors": [
        "ErrorCode",
        "StateGraphError",
        "TransitionError",
        "UnmatchedEventError",
        "OptionsError",
    ],
    "protocols": [
        "MachineProtocol",
        "StateNodeProtocol",
        "TransitionDefinitionProtocol",
    ],
    "serialization": [
        "serialize_state",
        "serialize_event",
        "deserialize_event_key",
        "to_event_object",
        "canonical_json",
    ],
    "options": [
        "ExplorationOptions",
        "resolve_options",
    ],
    "paths": [
        "AdjacencyEntry",
        "Segment",
        "StatePath",
        "StatePaths",
    ],
    "adjacency": [
        "ExplorationContext",
        "get_adjacency_map",
    ],
    "shortest": [
        "get_shortest_paths",
        "shortest_paths_from_adjacency",
    ],
    "simple": [
        "get_simple_paths",
        "get_simple_paths_as_list",
        "simple_paths_from_adjacency",
    ],
    "replay": [
        "get_path_from_events",
    ],
    "directed_graph": [
        "DirectedGraphNode",
        "DirectedGraphEdge",
        "EdgeLabel",
        "to_directed_graph",
        "get_children",
        "get_state_nodes",
    ],
}


def _import_names(module_rel_name: str, names: List[str]) -> None:
    """Re-export *names* from ``stategraph.<module_rel_name>`` at package level.

    A registry entry naming a symbol the submodule lacks is a packaging bug
    and fails the package import.
    """
    fq_name = f"{__name__}.{module_rel_name}"
    try:
        mod = importlib.import_module(fq_name)
    except ImportError as exc:
        raise ImportError(
            f"stategraph: required submodule '{module_rel_name}' "
            f"failed to import: {exc}"
        ) from exc

    current_module = sys.modules[__name__]
    for name in names:
        obj = getattr(mod, name, None)
        if obj is None:
            raise AttributeError(
                f"stategraph.{module_rel_name} does not export '{name}'"
            )
        setattr(current_module, name, obj)
        __all__.append(name)

    # Also expose the submodule itself so that both
    #   stategraph.adjacency.get_adjacency_map
    # and
    #   stategraph.get_adjacency_map
    # work.
    setattr(current_module, module_rel_name, mod)
    if module_rel_name not in __all__:
        __all__.append(module_rel_name)


for _mod, _names in _CORE_MODULES.items():
    _import_names(_mod, _names)

del _mod, _names


# ---------------------------------------------------------------------------
# Package-level utilities
# ---------------------------------------------------------------------------

def list_submodules() -> List[str]:
    """Return the names of all submodules in the package."""
    return sorted(_CORE_MODULES.keys())


def package_info() -> dict:
    """Return a dict of metadata about the package.

    Useful when logging the environment of a test-generation run.
    """
    loaded = []
    missing = []
    for mod_name in list_submodules():
        if f"{__name__}.{mod_name}" in sys.modules:
            loaded.append(mod_name)
        else:
            missing.append(mod_name)

    return {
        "package": __name__,
        "version": __version__,
        "python": sys.version,
        "loaded_submodules": loaded,
        "missing_submodules": missing,
        "all_exports": list(__all__),
    }


__all__ += ["list_submodules", "package_info", "__version__"]

# ---------------------------------------------------------------------------
# Static re-declarations for type checkers and IDEs
# ---------------------------------------------------------------------------

if TYPE_CHECKING:
    from .errors import (
        ErrorCode as ErrorCode,
        StateGraphError as StateGraphError,
        TransitionError as TransitionError,
        UnmatchedEventError as UnmatchedEventError,
        OptionsError as OptionsError,
    )
    from .protocols import (
        MachineProtocol as MachineProtocol,
        StateNodeProtocol as StateNodeProtocol,
        TransitionDefinitionProtocol as TransitionDefinitionProtocol,
    )
    from .serialization import (
        serialize_state as serialize_state,
        serialize_event as serialize_event,
        deserialize_event_key as deserialize_event_key,
        to_event_object as to_event_object,
        canonical_json as canonical_json,
    )
    from .options import (
        ExplorationOptions as ExplorationOptions,
        resolve_options as resolve_options,
    )
    from .paths import (
        AdjacencyEntry as AdjacencyEntry,
        Segment as Segment,
        StatePath as StatePath,
        StatePaths as StatePaths,
    )
    from .adjacency import (
        ExplorationContext as ExplorationContext,
        get_adjacency_map as get_adjacency_map,
    )
    from .shortest import (
        get_shortest_paths as get_shortest_paths,
        shortest_paths_from_adjacency as shortest_paths_from_adjacency,
    )
    from .simple import (
        get_simple_paths as get_simple_paths,
        get_simple_paths_as_list as get_simple_paths_as_list,
        simple_paths_from_adjacency as simple_paths_from_adjacency,
    )
    from .replay import (
        get_path_from_events as get_path_from_events,
    )
    from .directed_graph import (
        DirectedGraphNode as DirectedGraphNode,
        DirectedGraphEdge as DirectedGraphEdge,
        EdgeLabel as EdgeLabel,
        to_directed_graph as to_directed_graph,
        get_children as get_children,
        get_state_nodes as get_state_nodes,
    )
