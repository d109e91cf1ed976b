"""
Registered pick policies.

  - blended : the dynamic rank/entropy final pick (the advisor's recommendation)
  - rank    : the clean rank-ordered top pick (most common word first)
  - entropy : the clean entropy-ordered top pick (most informative word first)

Mainly useful for comparing strategies in self-play batches.
"""

from __future__ import annotations
from typing import Optional

from .base import BaseSolver, register
from .ranking import Recommendation


@register
class BlendedSolver(BaseSolver):
    id = "blended"
    name = "Blended Rank/Entropy"
    version = "1.0.0"

    def next_guess(self, rec: Recommendation) -> Optional[str]:
        return rec.final


@register
class RankSolver(BaseSolver):
    id = "rank"
    name = "Rank (most common clean word)"
    version = "1.0.0"

    def next_guess(self, rec: Recommendation) -> Optional[str]:
        return rec.rank_pick.primary


@register
class EntropySolver(BaseSolver):
    id = "entropy"
    name = "Entropy (Expected Information Gain)"
    version = "2.0.0"

    def next_guess(self, rec: Recommendation) -> Optional[str]:
        return rec.entropy_pick.primary
