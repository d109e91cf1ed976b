from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence

from packages.datasets.dictionary import DictionaryIndex, NounForm, VerbForm
from packages.engine import ConstraintState
from .entropy import compute_entropies


@dataclass(frozen=True)
class CandidateMetrics:
    word: str
    entropy: float
    rank: int
    noun_form: NounForm
    verb_form: VerbForm
    is_risky: bool


def is_risky(word: str, required_counts: Mapping[str, int]) -> bool:
    """
    True if `word` repeats a letter more often than the board has confirmed,
    i.e. it bets on an unconfirmed double.
    """
    for letter, n in Counter(word).items():
        if n > 1 and n > required_counts.get(letter, 0):
            return True
    return False


def build_metrics(possible_answers: Sequence[str], dictionary: DictionaryIndex,
                  state: ConstraintState, workers: Optional[int] = None) -> List[CandidateMetrics]:
    """
    One metrics record per possible answer, in the same order.

    Entropy is always measured against the full current possible-answer list;
    words missing from the dictionary get rank 0 and neutral forms.
    """
    entropies = compute_entropies(possible_answers, possible_answers, workers=workers)
    out: List[CandidateMetrics] = []
    for word, h in zip(possible_answers, entropies):
        rec = dictionary.lookup(word)
        out.append(CandidateMetrics(
            word=word,
            entropy=h,
            rank=rec.rank,
            noun_form=rec.noun_form,
            verb_form=rec.verb_form,
            is_risky=is_risky(word, state.required_counts),
        ))
    return out
