import logging

import pytest
from packages.engine import (
    ConstraintState, InvalidInput, score, score_code, pattern_code, decode_pattern,
    validate_guess, validate_feedback,
)

# --- golden feedback (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("BELLE", "LEVEL", "BGYYY"),
    ("LEVEL", "LEVEL", "GGGGG"),
    ("LEMON", "LEVEL", "GGBBB"),
    ("COOLS", "SCOOP", "YYGBY"),
    ("RAISE", "CRANE", "YYBBG"),
    ("STARE", "CRANE", "BBGYG"),
    ("SPEED", "ERASE", "YBYYB"),
    ("ABETS", "BEATS", "YYYGG"),
    ("CRANE", "TRACE", "YGGBG"),
    ("EERIE", "CRANE", "BBYBG"),
    ("LLAMA", "HELLO", "YYBBB"),
])
def test_score_golden(guess, answer, expected):
    assert score(guess, answer) == expected


def test_duplicate_guess_letter_counted_once():
    # Two E's guessed, one in the answer: exactly one E is marked
    patt = score("EERIE", "CRANE")
    marked = [m for g, m in zip("EERIE", patt) if g == "E" and m != "B"]
    assert len(marked) == 1


def test_pattern_codes():
    assert pattern_code("BBBBB") == 0
    assert pattern_code("GGGGG") == 242
    assert decode_pattern(pattern_code("YGBBG")) == "YGBBG"
    assert score_code("SPEED", "ERASE") == pattern_code("YBYYB")


def test_validate_guess_and_feedback():
    assert validate_guess(" crane ") == "CRANE"
    assert validate_guess("CRANE", allowed={"CRANE"}) == "CRANE"
    for bad in ("cranes", "???", "cr4ne", None):
        with pytest.raises(InvalidInput):
            validate_guess(bad)
    with pytest.raises(InvalidInput):
        validate_guess("SLATE", allowed={"CRANE"})

    assert validate_feedback("bg-yY") == "BGBYY"
    with pytest.raises(InvalidInput):
        validate_feedback("BGYB")
    with pytest.raises(InvalidInput):
        validate_feedback("BGYBX")


# --- constraint state ---
def test_update_crane_against_trace():
    st = ConstraintState()
    st.update("CRANE", "YGGBG", 1)

    assert st.green_mask == [None, "R", "A", None, "E"]
    assert st.required_counts == {"C": 1, "R": 1, "A": 1, "E": 1}
    assert st.excluded_letters == {"N"}
    assert st.positional_exclusions[0] == ["C", None, None, "N", None]

    assert st.filter_possible_answers(["CRANE", "SLATE", "TRACE"]) == ["TRACE"]


def test_black_duplicate_not_excluded_when_confirmed_elsewhere():
    # EERIE vs CRANE: first two E's black, last E green
    st = ConstraintState()
    st.update("EERIE", "BBYBG", 1)
    assert "E" not in st.excluded_letters
    assert st.required_counts["E"] == 1
    assert st.excluded_letters == {"I"}
    assert st.fits("CRANE")


def test_yellow_duplicates_raise_required_count():
    st = ConstraintState()
    st.update("SPEED", "YBYYB", 1)
    assert st.required_counts == {"S": 1, "E": 2}
    assert st.excluded_letters == {"P", "D"}
    assert st.fits("ERASE")
    assert not st.fits("EASEL")   # E ruled out at position 4
    assert not st.fits("ARISE")   # only one E


def test_required_counts_never_decrease():
    st = ConstraintState()
    seen = []
    for turn, (g, p) in enumerate([("SPEED", score("SPEED", "ERASE")),
                                   ("EATEN", score("EATEN", "ERASE")),
                                   ("BREAK", score("BREAK", "ERASE"))], start=1):
        st.update(g, p, turn)
        seen.append(dict(st.required_counts))

    for before, after in zip(seen, seen[1:]):
        for letter, n in before.items():
            assert after.get(letter, 0) >= n
    assert st.required_counts["E"] == 2
    assert st.fits("ERASE")


def test_letter_required_earlier_is_not_excluded_by_later_black(caplog):
    # Contradictory input: C confirmed on turn 1, all black on turn 2
    st = ConstraintState()
    st.update("CRANE", "YGGBG", 1)
    with caplog.at_level(logging.WARNING, logger="packages.engine.constraints"):
        st.update("CLOMP", "BBBBB", 2)

    assert "C" not in st.excluded_letters
    assert st.required_counts["C"] == 1
    assert st.positional_exclusions[1][0] == "C"
    assert {"L", "O", "M", "P"} <= st.excluded_letters
    assert any("confirmed on an earlier turn" in r.message for r in caplog.records)
    assert st.fits("TRACE")


def test_letter_excluded_earlier_is_released_by_later_confirmation(caplog):
    # Contradictory input: A all black on turn 1, yellow on turn 2
    st = ConstraintState()
    st.update("CRANE", "BBBBB", 1)
    with caplog.at_level(logging.WARNING, logger="packages.engine.constraints"):
        st.update("ABOUT", "YBBBB", 2)

    assert st.required_counts["A"] == 1
    assert "A" not in st.excluded_letters
    assert not set(st.required_counts) & st.excluded_letters
    assert {"C", "R", "N", "E", "B", "O", "U", "T"} <= st.excluded_letters
    assert any("no longer excluding" in r.message for r in caplog.records)
    assert st.fits("SALAD")


def test_positional_exclusions_apply_across_turns():
    st = ConstraintState()
    st.update("TRACE", "YBBBB", 1)   # T somewhere, but not first
    st.update("STOMP", "BYBBB", 2)   # T not second either
    assert st.fits("UNTIL")
    assert not st.fits("TYING")      # T ruled out at position 1 on turn 1
    assert not st.fits("XTULY")      # T ruled out at position 2 on turn 2


def test_filter_preserves_order_and_state():
    st = ConstraintState()
    st.update("CRANE", "BBBBB", 1)
    before = (list(st.green_mask), dict(st.required_counts), set(st.excluded_letters))
    words = ["LOUSY", "CRANE", "BUILT", "MOIST"]
    assert st.filter_possible_answers(words) == ["LOUSY", "BUILT", "MOIST"]
    assert (list(st.green_mask), dict(st.required_counts), set(st.excluded_letters)) == before


def test_turn_bounds_and_bad_input():
    st = ConstraintState()
    with pytest.raises(InvalidInput):
        st.update("CRANE", "BBBBB", 0)
    with pytest.raises(InvalidInput):
        st.update("CRANE", "BBBBB", 7)
    with pytest.raises(InvalidInput):
        st.update("CRAN", "BBBBB", 1)


def test_solved_when_mask_full():
    st = ConstraintState()
    assert not st.is_solved and st.solution is None
    st.update("TRACE", "GGGGG", 1)
    assert st.is_solved
    assert st.solution == "TRACE"
    assert st.mask_string() == "TRACE"


# --- soundness: the true answer always survives ---
WORDS = ["CRANE", "TRACE", "SLATE", "ERASE", "SPEED", "EERIE", "LEVEL", "BELLE", "LEMON",
         "SCOOP", "COOLS", "ABETS", "BEATS", "GEESE", "EVADE", "RAISE", "STARE", "CARED",
         "RACER", "LLAMA", "HELLO", "MAMMA"]
GUESSES = ["EERIE", "SPEED", "LLAMA", "CRANE", "BELLE", "GEESE"]


@pytest.mark.parametrize("answer", WORDS)
def test_true_answer_never_filtered_out(answer):
    st = ConstraintState()
    possible = list(WORDS)
    for turn, guess in enumerate(GUESSES, start=1):
        st.update(guess, score(guess, answer), turn)
        possible = st.filter_possible_answers(possible)
        assert answer in possible
