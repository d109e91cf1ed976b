"""
Candidate ranking and the final-pick policy.

Two orderings over one metrics list (the lists hold references to the same
CandidateMetrics records, nothing is copied):
  - rank ordering    : rank desc, then entropy desc
  - entropy ordering : entropy desc (within EPSILON counts as equal), then rank desc

Each ordering is scanned by pick_clean() for the best two words that are not
plural nouns, past-tense or 3rd-person-singular verbs, and do not bet on an
unconfirmed repeated letter.

determine_final_pick() then blends the two:
  - large pool (N > SMALL_SET_LIMIT): keep the rank pick unless the entropy
    pick gains more than ENTROPY_RANK_THRESHOLD bits over it;
  - small pool: the most common word overall, ignoring the filter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import List, Optional, Sequence

from packages.datasets.dictionary import DictionaryIndex, NounForm, VerbForm
from packages.engine import ConstraintState
from .metrics import CandidateMetrics, build_metrics

log = logging.getLogger(__name__)

EPSILON = 1e-9
SMALL_SET_LIMIT = 25
ENTROPY_RANK_THRESHOLD = 0.50


def _entropy_cmp(a: float, b: float) -> int:
    """-1 if a is clearly higher, 1 if b is, 0 within EPSILON."""
    if a > b + EPSILON:
        return -1
    if b > a + EPSILON:
        return 1
    return 0


def _by_rank(p: CandidateMetrics, q: CandidateMetrics) -> int:
    if p.rank != q.rank:
        return q.rank - p.rank
    return _entropy_cmp(p.entropy, q.entropy)


def _by_entropy(p: CandidateMetrics, q: CandidateMetrics) -> int:
    c = _entropy_cmp(p.entropy, q.entropy)
    if c:
        return c
    return q.rank - p.rank


def rank_ordering(metrics: Sequence[CandidateMetrics]) -> List[CandidateMetrics]:
    return sorted(metrics, key=cmp_to_key(_by_rank))


def entropy_ordering(metrics: Sequence[CandidateMetrics]) -> List[CandidateMetrics]:
    return sorted(metrics, key=cmp_to_key(_by_entropy))


@dataclass(frozen=True)
class PickResult:
    primary: Optional[str] = None
    alternate: Optional[str] = None


def is_clean(m: CandidateMetrics) -> bool:
    """Not a plural noun, not a past / 3rd-person verb form, and not risky."""
    return (
        m.noun_form is not NounForm.PLURAL
        and m.verb_form not in (VerbForm.PAST, VerbForm.THIRD_PERSON_SINGULAR)
        and not m.is_risky
    )


def pick_clean(ordering: Sequence[CandidateMetrics]) -> PickResult:
    """
    First two clean words of `ordering` as (primary, alternate).

    Missing slots are backfilled from the front of the unfiltered ordering so
    a non-empty ordering always yields a primary, and an alternate whenever a
    second distinct word exists.
    """
    clean = [m.word for m in ordering if is_clean(m)][:2]
    primary = clean[0] if clean else None
    alternate = clean[1] if len(clean) > 1 else None

    for m in ordering:
        if primary is not None and alternate is not None:
            break
        if primary is None:
            primary = m.word
        elif m.word != primary:
            alternate = m.word

    return PickResult(primary, alternate)


def _find(word: Optional[str], ordering: Sequence[CandidateMetrics]) -> Optional[CandidateMetrics]:
    if word is None:
        return None
    for m in ordering:
        if m.word == word:
            return m
    return None


def determine_final_pick(
        rank_order: Sequence[CandidateMetrics],
        entropy_order: Sequence[CandidateMetrics],
        rank_pick: PickResult,
        entropy_pick: PickResult,
        n: int,
        *,
        small_set_limit: int = SMALL_SET_LIMIT,
        threshold: float = ENTROPY_RANK_THRESHOLD,
) -> Optional[str]:
    """
    Blend the rank and entropy picks into one recommendation.

    Args:
      rank_order, entropy_order : the two orderings of the same metrics
      rank_pick, entropy_pick   : pick_clean() of each ordering
      n                         : size of the current possible-answer set
      small_set_limit           : at or below this size, frequency wins outright
      threshold                 : entropy gain (bits) the entropy pick must
                                  strictly exceed to beat the rank pick

    Returns:
      the chosen word, or None when there are no candidates at all.
    """
    if not rank_order:
        return None
    top_rank = rank_order[0].word

    r = _find(rank_pick.primary, rank_order)
    e = _find(entropy_pick.primary, entropy_order)
    if r is None or e is None:
        log.debug("pick not resolvable (rank=%s, entropy=%s); using top rank %s",
                  rank_pick.primary, entropy_pick.primary, top_rank)
        return top_rank

    if n > small_set_limit:
        diff = abs(e.entropy - r.entropy)
        if diff > threshold:
            return e.word
        return r.word

    return top_rank


@dataclass
class Recommendation:
    """Everything a turn driver needs to render one turn."""
    possible_answers: List[str]
    metrics: List[CandidateMetrics] = field(default_factory=list)
    rank_order: List[CandidateMetrics] = field(default_factory=list)
    entropy_order: List[CandidateMetrics] = field(default_factory=list)
    rank_pick: PickResult = field(default_factory=PickResult)
    entropy_pick: PickResult = field(default_factory=PickResult)
    final: Optional[str] = None

    def metrics_for(self, word: Optional[str]) -> Optional[CandidateMetrics]:
        return _find(word, self.metrics)


def recommend(
        possible_answers: Sequence[str],
        dictionary: DictionaryIndex,
        state: ConstraintState,
        *,
        workers: Optional[int] = None,
        small_set_limit: int = SMALL_SET_LIMIT,
        threshold: float = ENTROPY_RANK_THRESHOLD,
) -> Recommendation:
    """Metrics -> both orderings -> clean picks -> final pick, for one turn."""
    possible = list(possible_answers)
    if not possible:
        return Recommendation(possible)

    metrics = build_metrics(possible, dictionary, state, workers=workers)
    by_rank = rank_ordering(metrics)
    by_entropy = entropy_ordering(metrics)
    rank_pick = pick_clean(by_rank)
    entropy_pick = pick_clean(by_entropy)
    final = determine_final_pick(by_rank, by_entropy, rank_pick, entropy_pick, len(possible),
                                 small_set_limit=small_set_limit, threshold=threshold)

    log.debug("N=%d rank pick=%s entropy pick=%s final=%s",
              len(possible), rank_pick.primary, entropy_pick.primary, final)
    return Recommendation(possible, metrics, by_rank, by_entropy, rank_pick, entropy_pick, final)
