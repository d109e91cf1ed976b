"""
Dictionary index: rank and morphology per word.

File format (one entry per line, fixed width, no delimiter):

    [WORD (5)][RANK (3)][NOUN (1)][VERB (1)]      e.g.  ABETS070NS

  - RANK : 000 (rarest) .. 100 (most common)
  - NOUN : S = singular, P = plural, N = not a noun / irrelevant
  - VERB : P = base form, S = 3rd person singular, T = past tense,
           N = not a verb / irrelevant

The index is built once and read-only afterwards. A word that is not in the
index still gets a record: the neutral one (rank 0, N/N).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from packages.engine import InvalidInput, WORD_SIZE, is_word
from .io import read_lines

log = logging.getLogger(__name__)

RECORD_WIDTH = WORD_SIZE + 5  # word + 3-digit rank + noun code + verb code
MAX_RANK = 100


class NounForm(Enum):
    SINGULAR = "S"
    PLURAL = "P"
    NOT_APPLICABLE = "N"


class VerbForm(Enum):
    BASE = "P"
    THIRD_PERSON_SINGULAR = "S"
    PAST = "T"
    NOT_APPLICABLE = "N"


@dataclass(frozen=True)
class WordRecord:
    word: str
    rank: int = 0
    noun_form: NounForm = NounForm.NOT_APPLICABLE
    verb_form: VerbForm = VerbForm.NOT_APPLICABLE

    def __post_init__(self):
        if not is_word(self.word) or self.word != self.word.upper():
            raise InvalidInput(f"word must be {WORD_SIZE} uppercase letters, got {self.word!r}")
        if not 0 <= self.rank <= MAX_RANK:
            raise InvalidInput(f"rank for {self.word} must be 0..{MAX_RANK}, got {self.rank}")

    def to_line(self) -> str:
        return f"{self.word}{self.rank:03d}{self.noun_form.value}{self.verb_form.value}"


def neutral_record(word: str) -> WordRecord:
    """Record used for words missing from the dictionary."""
    return WordRecord(word)


def parse_record(line: str) -> WordRecord:
    """
    Parse one fixed-width dictionary line. Trailing characters past the
    10th are ignored; the word is uppercased.

    Raises InvalidInput on a short line, non-numeric rank or unknown code.
    """
    s = line.strip()
    if len(s) < RECORD_WIDTH:
        raise InvalidInput(f"dictionary line too short: {line!r}")

    word = s[:WORD_SIZE].upper()
    rank_s = s[WORD_SIZE:WORD_SIZE + 3]
    if not rank_s.isdigit():
        raise InvalidInput(f"bad rank {rank_s!r} in line {line!r}")
    try:
        noun = NounForm(s[WORD_SIZE + 3].upper())
        verb = VerbForm(s[WORD_SIZE + 4].upper())
    except ValueError as e:
        raise InvalidInput(f"bad linguistic code in line {line!r}") from e

    return WordRecord(word, int(rank_s), noun, verb)


class DictionaryIndex:
    """Word -> WordRecord lookup, keeping load order for iteration."""

    def __init__(self, records: Iterable[WordRecord]):
        self._by_word: Dict[str, WordRecord] = {}
        for rec in records:
            if rec.word in self._by_word:
                log.debug("duplicate dictionary entry %s; keeping the later one", rec.word)
            self._by_word[rec.word] = rec

    def get(self, word: str) -> Optional[WordRecord]:
        return self._by_word.get(word)

    def lookup(self, word: str) -> WordRecord:
        """Record for `word`, or the neutral record on a miss."""
        rec = self._by_word.get(word)
        return rec if rec is not None else neutral_record(word)

    @property
    def words(self) -> List[str]:
        return list(self._by_word)

    def __len__(self) -> int:
        return len(self._by_word)

    def __contains__(self, word: object) -> bool:
        return word in self._by_word

    def __iter__(self):
        return iter(self._by_word.values())


def load_dictionary(path: Path | str, *, strict: bool = False) -> DictionaryIndex:
    """
    Load a dictionary file into an index.

    Malformed lines are skipped with a warning, or raise InvalidInput when
    `strict` is set. Missing files raise FileNotFoundError.
    """
    records: List[WordRecord] = []
    skipped = 0
    for ln in read_lines(path):
        try:
            records.append(parse_record(ln))
        except InvalidInput as e:
            if strict:
                raise
            skipped += 1
            log.warning("skipping dictionary line: %s", e)

    index = DictionaryIndex(records)
    log.info("loaded %d words from %s (%d lines skipped)", len(index), path, skipped)
    return index


def initial_possible_answers(index: DictionaryIndex, used_words: Iterable[str]) -> List[str]:
    """Dictionary words that have not been used as answers yet, in dictionary order."""
    used = {w.strip().upper() for w in used_words}
    return [w for w in index.words if w not in used]
