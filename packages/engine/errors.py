"""
Error kinds raised by the solving engine.

  - InvalidInput : malformed guess / feedback / dictionary line / turn index
  - Exhausted    : filtering left no possible answers (contradictory feedback)

A dictionary miss is NOT an error; lookups degrade to neutral defaults.
"""

from __future__ import annotations


class WordleError(Exception):
    """Base class for every error the advisor raises on purpose."""


class InvalidInput(WordleError, ValueError):
    pass


class Exhausted(WordleError, RuntimeError):
    """No dictionary word is consistent with the feedback seen so far."""

    def __init__(self, turn: int, message: str | None = None):
        self.turn = turn
        super().__init__(message or f"no possible answers remain after turn {turn}; check your input")
