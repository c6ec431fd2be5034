# tests/conftest.py
"""Shared fixtures for the stategraph test suite."""

import pytest

from stategraph import ExplorationOptions
from tests.machines import (
    FlatMachine,
    counter_machine,
    diamond_machine,
    light_machine,
    structure_tree,
    two_state_machine,
)


def _bounded_counter():
    return (
        counter_machine(),
        ExplorationOptions(
            events={"INC": lambda s: [{"type": "INC", "by": 1}, {"type": "INC", "by": 2}]},
            filter=lambda s: s.context["count"] <= 3,
        ),
    )


MACHINE_FACTORIES = {
    "two_state": lambda: (two_state_machine(), None),
    "diamond": lambda: (diamond_machine(), None),
    "light": lambda: (light_machine(), None),
    "bounded_counter": _bounded_counter,
}


@pytest.fixture
def two_state():
    return two_state_machine()


@pytest.fixture
def diamond():
    return diamond_machine()


@pytest.fixture
def light():
    return light_machine()


@pytest.fixture
def counter():
    return counter_machine()


@pytest.fixture
def flat():
    return FlatMachine()


@pytest.fixture
def tree():
    return structure_tree()


@pytest.fixture(params=sorted(MACHINE_FACTORIES))
def machine_and_options(request):
    """(machine, options) for every finite sample machine."""
    return MACHINE_FACTORIES[request.param]()
