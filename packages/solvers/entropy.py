"""
Entropy scorer (expected information gain of a guess).

For a candidate guess g and the current possible answers A (|A| = N):
  - score g against every a in A and bucket the ternary pattern codes into a
    fixed 243-slot count table (np.bincount), O(N) per candidate;
  - H(g) = sum_k (c_k / N) * log2(N / c_k) over the non-empty buckets.

H is 0 when every answer yields the same pattern and at most log2(N).
Scoring every candidate of the pool is O(N^2) per turn, which dominates the
turn; compute_entropies can spread it over worker processes.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import List, Optional, Sequence

import numpy as np

from packages.engine import score_code
from packages.engine.scoring import NUM_PATTERNS

log = logging.getLogger(__name__)

# Below this many candidates a process pool costs more than it saves
PARALLEL_MIN_CANDIDATES = 200


def pattern_counts(candidate: str, possible_answers: Sequence[str]) -> np.ndarray:
    """Count of each of the 243 feedback patterns `candidate` produces over the answers."""
    codes = np.fromiter((score_code(candidate, a) for a in possible_answers),
                        dtype=np.int64, count=len(possible_answers))
    return np.bincount(codes, minlength=NUM_PATTERNS)


def compute_entropy(candidate: str, possible_answers: Sequence[str]) -> float:
    """Shannon entropy, in bits, of the feedback distribution for `candidate`."""
    n = len(possible_answers)
    if n <= 1:
        return 0.0

    counts = pattern_counts(candidate, possible_answers)
    nz = counts[counts > 0]
    return float(np.sum(nz / n * np.log2(n / nz)))


def compute_entropies(candidates: Sequence[str], possible_answers: Sequence[str],
                      workers: Optional[int] = None) -> List[float]:
    """
    Entropy of every candidate against the same possible-answer list, in
    candidate order. With workers > 1 the candidates are split across a
    process pool; the call returns only after every candidate is scored.
    """
    answers = tuple(possible_answers)
    t0 = time.perf_counter()

    if workers and workers > 1 and len(candidates) >= PARALLEL_MIN_CANDIDATES:
        chunksize = max(1, len(candidates) // (workers * 4))
        with ProcessPoolExecutor(max_workers=workers) as pool:
            out = list(pool.map(partial(compute_entropy, possible_answers=answers),
                                candidates, chunksize=chunksize))
    else:
        out = [compute_entropy(c, answers) for c in candidates]

    log.debug("entropy for %d candidates over %d answers in %.1f ms",
              len(candidates), len(answers), (time.perf_counter() - t0) * 1000.0)
    return out
