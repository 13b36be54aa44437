from pathlib import Path

import pytest

from valve_pressure.network.model import ValveRecord
from valve_pressure.network.reduce import reduce_network
from valve_pressure.parsing import load_scan
from valve_pressure.search.bound import bound
from valve_pressure.search.branch import branch
from valve_pressure.search.state import SearchState
from valve_pressure.synthetic import SyntheticSpec, generate_network

EXAMPLE = Path(__file__).parent / "fixtures" / "example_scan.txt"


def _best_from(state, network):
    """Exhaustive optimum below ``state``, no pruning."""
    return max([state.pressure] + [_best_from(c, network) for c in branch(state, network)])


def _all_states(state, network):
    yield state
    for child in branch(state, network):
        yield from _all_states(child, network)


def test_root_children_cover_every_flowing_valve():
    network = reduce_network(load_scan(EXAMPLE))
    root = SearchState.initial(network, 30)
    children = branch(root, network)
    assert [network.names[c.position] for c in children] == ["BB", "CC", "DD", "EE", "HH", "JJ"]
    dd = children[2]
    assert dd.remaining == 28
    assert dd.pressure == 20 * 28
    assert dd.visited == 1 << 3
    assert dd.opened == (3,)


def test_children_need_a_minute_left_after_opening():
    network = reduce_network(load_scan(EXAMPLE))
    assert branch(SearchState.initial(network, 2), network) == []
    names = {network.names[c.position] for c in branch(SearchState.initial(network, 3), network)}
    assert names == {"BB", "DD"}


def test_transitions_keep_invariants():
    network = reduce_network(load_scan(EXAMPLE))
    root = SearchState.initial(network, 12)
    for state in _all_states(root, network):
        for child in branch(state, network):
            assert child.remaining < state.remaining
            assert child.visited & state.visited == state.visited
            assert child.pressure >= state.pressure
            assert not state.visited & (1 << child.position)


def test_zero_flow_start_is_never_a_target():
    network = reduce_network(load_scan(EXAMPLE))
    root = SearchState.initial(network, 10)
    for state in _all_states(root, network):
        assert not state.visited & (1 << network.start)


def test_flowing_start_can_be_opened_first():
    records = [ValveRecord("AA", 10, ("BB",)), ValveRecord("BB", 5, ("AA",))]
    network = reduce_network(records)
    root = SearchState.initial(network, 5)
    assert _best_from(root, network) == 50
    assert bound(root, network) >= 50


def test_negative_budget_rejected():
    network = reduce_network(load_scan(EXAMPLE))
    with pytest.raises(ValueError):
        SearchState.initial(network, -1)


@pytest.mark.parametrize("seed", range(8))
def test_bound_never_underestimates(seed):
    n_valves = 5 + seed % 3
    spec = SyntheticSpec(f"syn{seed}", n_valves, n_valves - 1, seed=seed, extra_tunnels=seed % 4)
    network = reduce_network(generate_network(spec))
    root = SearchState.initial(network, 14)
    for state in _all_states(root, network):
        assert bound(state, network) >= _best_from(state, network)


def test_bound_of_finished_state_is_its_pressure():
    network = reduce_network(load_scan(EXAMPLE))
    state = SearchState(position=3, remaining=0, visited=1 << 3, pressure=560)
    assert bound(state, network) == 560
