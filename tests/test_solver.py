from pathlib import Path

import pytest

from valve_pressure import (
    NetworkConfigError,
    SolverConfig,
    ValveRecord,
    load_scan,
    max_pressure,
    max_pressure_with_helper,
    reduce_network,
    solve_single,
    solve_with_helper,
)
from valve_pressure.synthetic import SyntheticSpec, generate_network

EXAMPLE = Path(__file__).parent / "fixtures" / "example_scan.txt"


@pytest.fixture(scope="module")
def example():
    return load_scan(EXAMPLE)


def test_example_alone(example):
    assert max_pressure(example, 30) == 1651


def test_example_with_helper(example):
    assert max_pressure_with_helper(example, 26) == 1707


def test_example_with_helper_under_pruning(example):
    config = SolverConfig(exhaustive_max_valves=0)
    assert max_pressure_with_helper(example, 26, config=config) == 1707


def test_plans_name_real_valves(example):
    flowing = {"BB", "CC", "DD", "EE", "HH", "JJ"}
    alone = solve_single(example, 30)
    assert len(set(alone.opened)) == len(alone.opened)
    assert set(alone.opened) <= flowing
    paired = solve_with_helper(example, 26)
    assert set(paired.own).isdisjoint(paired.helper)
    assert set(paired.own) | set(paired.helper) <= flowing
    assert alone.expanded > 0


def test_zero_budget_releases_nothing(example):
    assert max_pressure(example, 0) == 0
    assert max_pressure_with_helper(example, 0) == 0


def test_negative_budget_rejected(example):
    with pytest.raises(ValueError):
        max_pressure(example, -1)
    with pytest.raises(ValueError):
        max_pressure_with_helper(example, -1)


def test_optimum_grows_with_budget(example):
    network = reduce_network(example)
    alone = [max_pressure(network, t) for t in range(0, 31)]
    paired = [max_pressure_with_helper(network, t) for t in range(0, 27)]
    assert alone == sorted(alone)
    assert paired == sorted(paired)


def test_helper_never_hurts(example):
    network = reduce_network(example)
    for budget in (5, 12, 20, 26):
        assert max_pressure_with_helper(network, budget) >= max_pressure(network, budget)


@pytest.mark.parametrize("seed", range(4))
def test_helper_never_hurts_on_synthetic(seed):
    spec = SyntheticSpec(f"syn{seed}", 16, 10, seed=seed, extra_tunnels=6)
    network = reduce_network(generate_network(spec))
    assert max_pressure_with_helper(network, 18) >= max_pressure(network, 18)



@pytest.mark.parametrize("seed", [3, 19, 34])
def test_default_helper_pass_finds_the_best_pairing(seed):
    spec = SyntheticSpec(f"syn{seed}", 20, 11, seed=seed, extra_tunnels=5)
    network = reduce_network(generate_network(spec))
    exhaustive = SolverConfig(helper_prune_ratio=None)
    expected = max_pressure_with_helper(network, 18, config=exhaustive)
    assert max_pressure_with_helper(network, 18) == expected
    assert solve_with_helper(network, 18).pruned == 0


def test_helper_pruning_only_beyond_the_exhaustive_threshold():
    spec = SyntheticSpec("syn19", 20, 11, seed=19, extra_tunnels=5)
    network = reduce_network(generate_network(spec))
    pruned = solve_with_helper(network, 18, config=SolverConfig(exhaustive_max_valves=0))
    assert pruned.pruned > 0
    assert pruned.pressure <= max_pressure_with_helper(network, 18)

def test_repeat_calls_agree(example):
    network = reduce_network(example)
    assert max_pressure(network, 30) == max_pressure(network, 30)
    assert solve_with_helper(network, 26) == solve_with_helper(network, 26)


def test_records_and_reduced_network_agree(example):
    assert max_pressure(example, 24) == max_pressure(reduce_network(example), 24)


def test_empty_network():
    assert max_pressure([], 30) == 0
    assert max_pressure_with_helper([], 26) == 0


def test_all_zero_flow_network():
    records = [ValveRecord("AA", 0, ("BB",)), ValveRecord("BB", 0, ("AA",))]
    assert max_pressure(records, 30) == 0
    assert max_pressure_with_helper(records, 26) == 0


def test_dead_end_zero_flow_valve_is_irrelevant(example):
    extended = [
        ValveRecord(r.name, r.flow, r.neighbors + ("ZZ",)) if r.name == "AA" else r
        for r in example
    ]
    extended.append(ValveRecord("ZZ", 0, ("AA",)))
    assert max_pressure(extended, 30) == 1651
    assert max_pressure_with_helper(extended, 26) == 1707


def test_single_flowing_valve():
    records = [
        ValveRecord("AA", 0, ("BB",)),
        ValveRecord("BB", 0, ("AA", "CC")),
        ValveRecord("CC", 7, ("BB",)),
    ]
    # Two steps, one minute to open, 27 minutes of flow.
    assert max_pressure(records, 30) == 7 * 27
    assert max_pressure_with_helper(records, 26) == 7 * 23


def test_mask_width_is_enforced(example):
    with pytest.raises(NetworkConfigError):
        max_pressure(example, 30, config=SolverConfig(mask_width=3))


def test_other_start_valve(example):
    assert max_pressure(example, 30, config=SolverConfig(start="JJ")) > 0
    with pytest.raises(NetworkConfigError):
        max_pressure(example, 30, config=SolverConfig(start="QQ"))
