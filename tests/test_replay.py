# tests/test_replay.py
"""
Tests for replaying explicit event sequences.
"""

import pytest

from stategraph import (
    ErrorCode,
    ExplorationOptions,
    UnmatchedEventError,
    get_path_from_events,
    get_shortest_paths,
    get_simple_paths,
)
from tests.machines import MachineState


class TestTwoStateScenario:

    def test_go(self, two_state):
        path = get_path_from_events(two_state, [{"type": "go"}])
        assert path.weight == 1
        assert path.state == MachineState("B")
        assert path.segments[0].state == MachineState("A")
        assert path.segments[0].event == {"type": "go"}

    def test_stop_is_unmatched(self, two_state):
        with pytest.raises(UnmatchedEventError) as info:
            get_path_from_events(two_state, [{"type": "stop"}])
        assert info.value.state_key == '"A"'
        assert info.value.event_key == '{"type":"stop"}'
        assert info.value.state == MachineState("A")
        assert info.value.event == {"type": "stop"}
        assert info.value.code is ErrorCode.UNMATCHED_EVENT


class TestReplay:

    def test_empty_sequence(self, diamond):
        path = get_path_from_events(diamond, [])
        assert path.weight == 0
        assert path.segments == ()
        assert path.state == diamond.initial_state

    def test_bare_event_types(self, diamond):
        path = get_path_from_events(diamond, ["x", "x", "reset", "y"])
        assert path.weight == 4
        assert path.state == MachineState("c")
        assert [s.state.value for s in path.segments] == ["a", "b", "d", "a"]

    def test_failure_mid_sequence(self, diamond):
        with pytest.raises(UnmatchedEventError) as info:
            get_path_from_events(diamond, ["x", "y"])
        assert info.value.state_key == '"b"'
        assert info.value.state == MachineState("b")
        assert info.value.event == {"type": "y"}

    def test_payload_events(self, counter):
        path = get_path_from_events(
            counter,
            [{"type": "INC", "by": 2}, {"type": "INC", "by": 1}],
            {"filter": lambda s: s.context["count"] <= 3},
        )
        assert path.state.context == {"count": 3}
        assert path.events == ({"type": "INC", "by": 2}, {"type": "INC", "by": 1})

    def test_filtered_step_is_unmatched(self, counter):
        with pytest.raises(UnmatchedEventError):
            get_path_from_events(
                counter,
                [{"type": "INC", "by": 5}],
                {"filter": lambda s: s.context["count"] <= 3},
            )

    def test_internal_transition_is_unmatched(self, light):
        with pytest.raises(UnmatchedEventError):
            get_path_from_events(light, ["PING"])

    def test_caller_events_option_replaced(self, two_state):
        options = ExplorationOptions(events={"go": []})
        path = get_path_from_events(two_state, ["go"], options)
        assert path.weight == 1

    def test_flat_machine(self, flat):
        path = get_path_from_events(flat, [])
        assert path.weight == 0
        assert path.state == MachineState("idle")


class TestReplayFidelity:

    def _check(self, machine, options, path):
        opts = options or ExplorationOptions()
        replayed = get_path_from_events(machine, list(path.events), options)
        assert replayed.weight == path.weight
        assert replayed.state_keys(opts.state_serializer) == path.state_keys(
            opts.state_serializer
        )

    def test_shortest_paths_replay(self, machine_and_options):
        machine, options = machine_and_options
        for entry in get_shortest_paths(machine, options).values():
            self._check(machine, options, entry.paths[0])

    def test_simple_paths_replay(self, machine_and_options):
        machine, options = machine_and_options
        for entry in get_simple_paths(machine, options).values():
            for path in entry.paths:
                self._check(machine, options, path)
