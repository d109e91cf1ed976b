"""
Persistence for self-play batches: per-game CSV, JSON manifest, run ids.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List
import csv
import json
import subprocess
import datetime as dt

from packages.engine import MAX_TURNS

BASE_FIELDS = ("solver", "answer", "success", "exhausted", "guesses", "time_ms")


def _turn_fields(max_turns: int) -> List[str]:
    out: List[str] = []
    for i in range(1, max_turns + 1):
        out += [f"guess_{i}", f"patt_{i}"]
    return out


def _flatten(r: Dict, max_turns: int) -> Dict:
    row = {
        "solver": r.get("solver_id", "?"),
        "answer": r["answer"],
        "success": r["success"],
        "exhausted": r.get("exhausted", False),
        "guesses": r["guesses"],
        "time_ms": round(float(r["time_ms"]), 3),
    }
    hist = list(r.get("history", []))[:max_turns]
    hist += [("", "")] * (max_turns - len(hist))
    for i, (guess, patt) in enumerate(hist, start=1):
        row[f"guess_{i}"] = guess
        row[f"patt_{i}"] = patt
    return row


def write_csv(results: Iterable[Dict], path: str, max_turns: int = MAX_TURNS) -> str:
    """
    One row per game. History is padded into guess_i/patt_i column pairs
    up to max_turns so every row has the same shape.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=list(BASE_FIELDS) + _turn_fields(max_turns))
        w.writeheader()
        w.writerows(_flatten(r, max_turns) for r in results)
    return str(p)


def summarize(results: List[Dict]) -> Dict:
    """Win rate and mean guesses over wins."""
    wins = [r for r in results if r["success"]]
    return {
        "num_cases": len(results),
        "wins": len(wins),
        "win_rate": (len(wins) / len(results)) if results else 0.0,
        "mean_guesses": (sum(r["guesses"] for r in wins) / len(wins)) if wins else None,
        "exhausted": sum(1 for r in results if r.get("exhausted")),
    }


def write_manifest(manifest: Dict, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return str(p)


def timestamp_id() -> str:
    """UTC run id for output file names, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.decode().strip()
