from itertools import product
from math import log2

import pytest
from packages.solvers import compute_entropy, compute_entropies
from packages.solvers.entropy import pattern_counts

WORDS = ["CRANE", "TRACE", "SLATE", "ERASE", "SPEED", "EERIE", "LEVEL", "BELLE",
         "LEMON", "SCOOP", "COOLS", "ABETS", "BEATS", "GEESE", "RAISE", "STARE"]


def test_singleton_and_empty_sets_have_zero_entropy():
    assert compute_entropy("CRANE", ["TRACE"]) == 0.0
    assert compute_entropy("CRANE", []) == 0.0


def test_all_distinct_patterns_reach_log2_n():
    # CRANE splits {CRANE, SLATE, TRACE} into GGGGG / BBGBG / YGGBG
    h = compute_entropy("CRANE", ["CRANE", "SLATE", "TRACE"])
    assert h == pytest.approx(log2(3))


def test_no_information_gives_zero():
    assert compute_entropy("QQQQQ", ["CRANE", "SLATE", "TRACE"]) == 0.0


def test_two_way_split():
    # Both answers without E give one pattern, both with E another
    h = compute_entropy("EEEEE", ["BUILT", "MOIST", "CRANE", "SLATE"])
    assert h == pytest.approx(1.0)


@pytest.mark.parametrize("candidate", WORDS)
def test_entropy_bounds(candidate):
    h = compute_entropy(candidate, WORDS)
    assert 0.0 <= h <= log2(len(WORDS)) + 1e-9


def test_pattern_counts_cover_every_answer():
    counts = pattern_counts("SPEED", WORDS)
    assert counts.shape == (243,)
    assert int(counts.sum()) == len(WORDS)


def test_compute_entropies_matches_single_calls():
    out = compute_entropies(WORDS, WORDS, workers=2)
    assert out == [compute_entropy(w, WORDS) for w in WORDS]


def test_compute_entropies_with_worker_processes():
    pool = ["".join(p) for p in product("ABCDE", repeat=5)][:210]
    serial = compute_entropies(pool, pool)
    parallel = compute_entropies(pool, pool, workers=2)
    assert parallel == pytest.approx(serial)
