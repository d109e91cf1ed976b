from .dictionary import (
    NounForm, VerbForm, WordRecord, DictionaryIndex,
    parse_record, load_dictionary, initial_possible_answers,
)
from .used_words import fetch_used_words_page, parse_used_words, load_used_words
from .validator import validate_dictionary, pretty_summary
from .io import read_lines, read_words, write_lines

__all__ = [
    "NounForm", "VerbForm", "WordRecord", "DictionaryIndex",
    "parse_record", "load_dictionary", "initial_possible_answers",
    "fetch_used_words_page", "parse_used_words", "load_used_words",
    "validate_dictionary", "pretty_summary",
    "read_lines", "read_words", "write_lines",
]
