from .scoring import score, score_code, pattern_code, decode_pattern, WORD_SIZE, SOLVED_PATTERN
from .constraints import ConstraintState, MAX_TURNS
from .validation import validate_guess, validate_feedback, is_word
from .errors import WordleError, InvalidInput, Exhausted

__all__ = [
    "score", "score_code", "pattern_code", "decode_pattern", "WORD_SIZE", "SOLVED_PATTERN",
    "ConstraintState", "MAX_TURNS",
    "validate_guess", "validate_feedback", "is_word",
    "WordleError", "InvalidInput", "Exhausted",
]
