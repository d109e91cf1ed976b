from __future__ import annotations
from typing import Dict, Optional, Type

from .ranking import Recommendation

# ---- Global pick-policy registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that pick policies inherit ----
class BaseSolver:
    """
    A pick policy turns one turn's Recommendation into the word to play.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def next_guess(self, rec: Recommendation) -> Optional[str]:
        raise NotImplementedError("Override in subclass")
