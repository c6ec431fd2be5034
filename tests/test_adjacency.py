# tests/test_adjacency.py
"""
Tests for exhaustive exploration (adjacency map construction).
"""

import pytest

from stategraph import (
    ErrorCode,
    ExplorationContext,
    ExplorationOptions,
    TransitionError,
    get_adjacency_map,
    serialize_state,
)
from tests.machines import (
    ExplodingMachine,
    MachineState,
    TableMachine,
    counter_machine,
)


def _reachable_keys(machine, options):
    """Independent BFS over the machine, used as the oracle."""
    opts = options or ExplorationOptions()
    start = machine.initial_state
    seen = {opts.state_serializer(start)}
    queue = [start]
    while queue:
        state = queue.pop(0)
        key = opts.state_serializer(state)
        ctx = ExplorationContext(machine, opts)
        for event in ctx.candidate_events(state):
            nxt = machine.transition(state, event)
            nkey = opts.state_serializer(nxt)
            if not opts.accepts(nxt) or nkey == key or nkey in seen:
                continue
            seen.add(nkey)
            queue.append(nxt)
    return seen


class TestTwoStateScenario:

    def test_adjacency(self, two_state):
        adj = get_adjacency_map(two_state)
        assert list(adj) == ['"A"', '"B"']
        assert list(adj['"A"']) == ['{"type":"go"}']
        entry = adj['"A"']['{"type":"go"}']
        assert entry.event == {"type": "go"}
        assert entry.state == MachineState("B")
        assert adj['"B"'] == {}


class TestExploration:

    def test_reachability_closure(self, machine_and_options):
        machine, options = machine_and_options
        adj = get_adjacency_map(machine, options)
        assert set(adj) == _reachable_keys(machine, options)

    def test_no_self_edges(self, machine_and_options):
        machine, options = machine_and_options
        opts = options or ExplorationOptions()
        adj = get_adjacency_map(machine, options)
        for key, row in adj.items():
            for entry in row.values():
                assert opts.state_serializer(entry.state) != key

    def test_every_target_is_a_key(self, machine_and_options):
        machine, options = machine_and_options
        opts = options or ExplorationOptions()
        adj = get_adjacency_map(machine, options)
        for row in adj.values():
            for entry in row.values():
                assert opts.state_serializer(entry.state) in adj

    def test_internal_transitions_not_recorded(self, light):
        adj = get_adjacency_map(light)
        assert '{"type":"PING"}' not in adj['"green"']
        assert '{"type":"POWER_OUTAGE"}' not in adj['"red"']
        assert set(adj['"yellow"']) == {'{"type":"TIMER"}', '{"type":"POWER_OUTAGE"}'}

    def test_discovery_is_depth_first(self, diamond):
        adj = get_adjacency_map(diamond)
        assert list(adj) == ['"a"', '"b"', '"d"', '"c"']

    def test_back_edges_recorded(self, diamond):
        adj = get_adjacency_map(diamond)
        assert adj['"d"']['{"type":"reset"}'].state == MachineState("a")

    def test_flat_machine_has_initial_only(self, flat):
        assert get_adjacency_map(flat) == {'"idle"': {}}

    def test_custom_initial_state(self, diamond):
        adj = get_adjacency_map(diamond, initial_state=MachineState("c"))
        assert list(adj)[0] == '"c"'

    def test_deep_chain_does_not_recurse(self):
        table = {f"s{i}": {"NEXT": f"s{i + 1}"} for i in range(3000)}
        table["s3000"] = {}
        machine = TableMachine("chain", "s0", table)
        adj = get_adjacency_map(machine)
        assert len(adj) == 3001


class TestFilter:

    def test_filter_prunes_targets(self, diamond):
        adj = get_adjacency_map(diamond, {"filter": lambda s: s.value != "c"})
        assert set(adj) == {'"a"', '"b"', '"d"'}
        assert '{"type":"y"}' not in adj['"a"']

    def test_filter_bounds_unbounded_machine(self, counter):
        adj = get_adjacency_map(counter, {"filter": lambda s: s.context["count"] < 5})
        assert len(adj) == 5
        assert '"active" | {"count":4}' in adj
        assert adj['"active" | {"count":4}'] == {}


class TestEventsOption:

    def test_fixed_list(self, counter):
        opts = ExplorationOptions(
            events={"INC": [{"type": "INC", "by": 2}]},
            filter=lambda s: s.context["count"] <= 4,
        )
        adj = get_adjacency_map(counter, opts)
        counts = sorted(int(k.split('"count":')[1].rstrip("}")) for k in adj)
        assert counts == [0, 2, 4]

    def test_callable(self, counter):
        seen = []

        def inc_events(state):
            seen.append(state.context["count"])
            return [{"type": "INC", "by": 1}, {"type": "INC", "by": 3}]

        opts = ExplorationOptions(
            events={"INC": inc_events},
            filter=lambda s: s.context["count"] <= 3,
        )
        adj = get_adjacency_map(counter, opts)
        assert len(adj) == 4
        assert sorted(seen) == [0, 1, 2, 3]
        row = adj['"active" | {"count":0}']
        assert set(row) == {'{"by":1,"type":"INC"}', '{"by":3,"type":"INC"}'}

    def test_bare_strings_are_normalized(self, two_state):
        adj = get_adjacency_map(two_state, {"events": {"go": ["go"]}})
        assert adj['"A"']['{"type":"go"}'].event == {"type": "go"}

    def test_empty_list_disables_type(self, two_state):
        adj = get_adjacency_map(two_state, {"events": {"go": []}})
        assert adj == {'"A"': {}}


class TestSerializerOverrides:

    def test_state_serializer_merges_configurations(self, counter):
        opts = ExplorationOptions(
            state_serializer=lambda s: s.value,
            filter=lambda s: s.context["count"] < 10,
        )
        adj = get_adjacency_map(counter, opts)
        assert adj == {"active": {}}

    def test_event_serializer(self, two_state):
        adj = get_adjacency_map(two_state, {"event_serializer": lambda e: e["type"]})
        assert list(adj['"A"']) == ["go"]


class TestTransitionFailure:

    def _machine(self):
        return ExplodingMachine(
            "boom", "A", {"A": {"go": "B"}, "B": {"BOOM": "A"}}
        )

    def test_wrapped(self):
        with pytest.raises(TransitionError) as info:
            get_adjacency_map(self._machine())
        err = info.value
        assert err.state_key == '"B"'
        assert err.event_key == '{"type":"BOOM"}'
        assert err.code is ErrorCode.TRANSITION_FAILED
        assert isinstance(err.__cause__, ValueError)
        assert "kaboom" in str(err)

    def test_filter_does_not_suppress_failure(self):
        with pytest.raises(TransitionError):
            get_adjacency_map(self._machine(), {"filter": lambda s: True})


class TestExplorationContext:

    def test_counts(self, diamond):
        ctx = ExplorationContext(diamond, ExplorationOptions())
        adj = ctx.run(diamond.initial_state)
        assert adj is ctx.adjacency
        assert ctx.num_states == 4
        assert ctx.num_edges == 5
        assert ctx.stack == []
        assert ctx.is_visited(serialize_state(diamond.initial_state))
