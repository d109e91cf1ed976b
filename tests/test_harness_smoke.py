import csv
import json
from pathlib import Path

import pytest
from packages.datasets import DictionaryIndex, NounForm, VerbForm, WordRecord
from packages.engine import Exhausted, InvalidInput, score
from packages.harness import (
    Advisor, run_batch, run_case, summarize, write_csv, write_manifest,
    format_final_pick, format_recommendation_table, format_state,
)
from packages.solvers import create_solver


@pytest.fixture
def small_dictionary():
    return DictionaryIndex([WordRecord("CRANE", 90), WordRecord("SLATE", 85), WordRecord("TRACE", 80)])


@pytest.fixture
def dictionary():
    # Six words: every wrong guess removes at least itself, so any policy wins within 6 turns
    words = [
        ("CRANE", 90, "N", "P"), ("SLATE", 85, "S", "P"), ("TRACE", 80, "S", "P"),
        ("CARES", 75, "P", "S"), ("RACED", 70, "N", "T"), ("LEVEL", 58, "S", "P"),
    ]
    return DictionaryIndex(WordRecord(w, r, NounForm(n), VerbForm(v)) for w, r, n, v in words)


def test_end_to_end_crane_slate_trace(small_dictionary):
    adv = Advisor(small_dictionary)
    assert adv.recommend().final == "CRANE"

    patt = score("CRANE", "TRACE")
    assert patt == "YGGBG"
    assert adv.apply("CRANE", patt) == ["TRACE"]
    assert adv.solution == "TRACE"
    assert adv.is_terminal
    assert adv.state.excluded_letters == {"N"}


def test_used_words_are_not_possible_answers(small_dictionary):
    adv = Advisor(small_dictionary, ["slate"])
    assert adv.possible == ["CRANE", "TRACE"]


def test_contradictory_feedback_exhausts(small_dictionary):
    adv = Advisor(small_dictionary)
    with pytest.raises(Exhausted):
        adv.apply("CRANE", "GGGGB")


def test_all_green_is_solved_even_outside_dictionary(small_dictionary):
    adv = Advisor(small_dictionary)
    adv.apply("ZESTY", "GGGGG")
    assert adv.state.is_solved
    assert adv.solution == "ZESTY"


def test_six_turn_limit(small_dictionary):
    adv = Advisor(small_dictionary)
    patt = score("SLATE", "TRACE")
    for _ in range(6):
        adv.apply("SLATE", patt)
    assert adv.turn == 6 and adv.is_terminal
    with pytest.raises(InvalidInput):
        adv.apply("SLATE", patt)


def test_bad_turn_input_does_not_consume_a_turn(small_dictionary):
    adv = Advisor(small_dictionary)
    with pytest.raises(InvalidInput):
        adv.apply("CRANE", "GGGXB")
    assert adv.turn == 0


@pytest.mark.parametrize("solver_id", ["blended", "rank", "entropy"])
def test_run_case_solves_every_answer(dictionary, solver_id):
    solver = create_solver(solver_id)
    for answer in dictionary.words:
        r = run_case(solver, answer, dictionary=dictionary)
        assert r["success"] is True, r
        assert r["history"][-1] == (answer, "GGGGG")
        assert r["guesses"] <= 6


def test_run_case_unknown_answer_is_exhausted(small_dictionary):
    r = run_case(create_solver("blended"), "ZESTY", dictionary=small_dictionary)
    assert r["success"] is False
    assert r["exhausted"] is True


def test_run_batch_and_outputs(tmp_path: Path, dictionary):
    results = run_batch(create_solver("blended"), dictionary.words, dictionary=dictionary, sample=5)
    assert len(results) == 5
    assert all(r["solver_id"] == "blended" for r in results)

    s = summarize(results)
    assert s["num_cases"] == 5 and s["wins"] == 5 and s["win_rate"] == 1.0

    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 5 and rows[0]["answer"] == results[0]["answer"]
    assert rows[0]["guess_1"] == results[0]["history"][0][0]

    man = write_manifest({"summary": s}, str(tmp_path / "out" / "m.json"))
    assert json.loads(Path(man).read_text(encoding="utf-8"))["summary"]["wins"] == 5


def test_report_formatting(small_dictionary):
    adv = Advisor(small_dictionary)
    rec = adv.recommend()

    table = format_recommendation_table(rec, top=3)
    assert "Rank-Optimized" in table and "Entropy-Optimized" in table
    assert "  1. CRANE (R=090, H=1.5850) N=N V=N R=N" in table
    assert "Top Pick  : CRANE" in table

    banner = format_final_pick(rec)
    assert "Final Top Pick: CRANE (R=090, H=1.5850)" in banner

    adv.apply("CRANE", "YGGBG")
    state = format_state(adv.state)
    assert "*RA*E" in state and "Excluded Letters: N" in state
