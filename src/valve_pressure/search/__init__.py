"""Branch-and-bound search over valve opening orders."""

from valve_pressure.search.bound import bound
from valve_pressure.search.branch import branch
from valve_pressure.search.combiner import Pairing, best_disjoint_pair
from valve_pressure.search.driver import BranchAndBound
from valve_pressure.search.state import SearchState

__all__ = [
    "BranchAndBound",
    "Pairing",
    "SearchState",
    "best_disjoint_pair",
    "bound",
    "branch",
]
