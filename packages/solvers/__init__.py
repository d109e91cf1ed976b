from __future__ import annotations
from typing import List
from .base import BaseSolver, REGISTRY, register
from .entropy import compute_entropy, compute_entropies
from .metrics import CandidateMetrics, build_metrics, is_risky
from .ranking import (
    PickResult, Recommendation, rank_ordering, entropy_ordering,
    pick_clean, determine_final_pick, recommend,
)

from . import policies  # noqa: F401


def create_solver(solver_id: str) -> BaseSolver:
    """
    Factory: instantiate a registered pick policy by id.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseSolver", "REGISTRY", "register", "create_solver", "get_solver_ids",
    "compute_entropy", "compute_entropies", "CandidateMetrics", "build_metrics", "is_risky",
    "PickResult", "Recommendation", "rank_ordering", "entropy_ordering",
    "pick_clean", "determine_final_pick", "recommend",
]
