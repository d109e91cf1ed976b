from .core import Advisor, run_case, run_batch, WORDLE_MAX_TURNS
from .io import write_csv, write_manifest, summarize
from .report import format_state, format_recommendation_table, format_final_pick

__all__ = [
    "Advisor", "run_case", "run_batch", "WORDLE_MAX_TURNS",
    "write_csv", "write_manifest", "summarize",
    "format_state", "format_recommendation_table", "format_final_pick",
]
