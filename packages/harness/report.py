"""
Plain-text rendering of a turn for console drivers.

  - format_state:                green mask, required and excluded letters
  - format_recommendation_table: rank-optimized vs entropy-optimized columns,
                                 with each column's top pick and alternate
  - format_final_pick:           the centered final recommendation banner

Column entries read:  " 1. CRANE (R=090, H=1.5850) N=N V=N R=N"
(R=rank, H=entropy, N=noun code, V=verb code, last R=repeat risk).
"""

from __future__ import annotations
from typing import List, Optional

from packages.engine import ConstraintState
from packages.solvers import CandidateMetrics, Recommendation

MAX_TOP_PICKS = 40
COL_WIDTH = 43
TOTAL_WIDTH = 2 * COL_WIDTH + 1
RULE = "-" * COL_WIDTH + "+" + "-" * COL_WIDTH
NONE_WORD = "NONE"


def _entry(i: int, m: CandidateMetrics) -> str:
    return (f"{i:3d}. {m.word:<5} (R={m.rank:03d}, H={m.entropy:.4f}) "
            f"N={m.noun_form.value} V={m.verb_form.value} R={'Y' if m.is_risky else 'N'}")


def _pick_line(label: str, word: Optional[str], m: Optional[CandidateMetrics]) -> str:
    rank = m.rank if m else 0
    h = m.entropy if m else 0.0
    return f"     {label:<10}: {word or NONE_WORD:<5} (R={rank:03d}, H={h:.4f})"


def _row(left: str, right: str) -> str:
    return f"{left:<{COL_WIDTH}}|{right:<{COL_WIDTH}}"


def format_state(state: ConstraintState) -> str:
    return "\n".join([
        "--- Current Game State ---",
        f"Mask (Green)    : {state.mask_string()}",
        f"Required Letters: {state.required_string()} (Min Count Constraint)",
        f"Excluded Letters: {''.join(sorted(state.excluded_letters))}",
    ])


def format_recommendation_table(rec: Recommendation, top: int = MAX_TOP_PICKS) -> str:
    n = len(rec.possible_answers)
    lines: List[str] = [
        f"{'':22}--- Top {top} Choices (Possible Answers: {n}) ---",
        f"{'':16}(R=Rank, H=Entropy, N=Plurality, V=Preterite, R=Repeat Risk)",
        RULE,
        _row("     Rank-Optimized", "     Entropy-Optimized"),
        _row("   (Higher Rank = More Common)", "   (Higher H = Reduces solution set)"),
        RULE,
    ]
    for i, (r, e) in enumerate(zip(rec.rank_order[:top], rec.entropy_order[:top]), start=1):
        lines.append(_row(_entry(i, r), _entry(i, e)))
    lines.append(RULE)

    rp, ep = rec.rank_pick, rec.entropy_pick
    lines.append(_row(_pick_line("Top Pick", rp.primary, rec.metrics_for(rp.primary)),
                      _pick_line("Top Pick", ep.primary, rec.metrics_for(ep.primary))))
    lines.append(_row(_pick_line("Alternate", rp.alternate, rec.metrics_for(rp.alternate)),
                      _pick_line("Alternate", ep.alternate, rec.metrics_for(ep.alternate))))
    lines.append(RULE)
    return "\n".join(lines)


def format_final_pick(rec: Recommendation) -> str:
    m = rec.metrics_for(rec.final)
    banner = (f"Final Top Pick: {rec.final or NONE_WORD} "
              f"(R={m.rank if m else 0:03d}, H={m.entropy if m else 0.0:.4f})")
    return f"{banner:^{TOTAL_WIDTH}}\n" + "-" * TOTAL_WIDTH
