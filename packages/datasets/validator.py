"""
Dictionary file validator.

What this module does:
- Validate a dictionary file in the fixed-width `WORDRRRNV` format
  (see packages.datasets.dictionary).
- Count valid / invalid lines, detect duplicate words, compute SHA-256 of the
  raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("data/AllWords.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

from packages.engine import InvalidInput
from .dictionary import parse_record


@dataclass
class DictionaryReport:
    """Diagnostics and metadata for one dictionary file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID records
    unique_count: int    # distinct words among valid records
    invalid_lines: int   # number of non-blank lines that failed to parse
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_dictionary(path: str) -> Dict:
    """
    Validate a dictionary file.

    Returns a JSON-serializable dict (see DictionaryReport). `passed` is strict:
    the file must exist, hold at least one record, and have no invalid or
    duplicate lines.
    """
    p = Path(path)
    if not p.exists():
        rep = DictionaryReport(path, False, 0, 0, 0, "", False, [f"dictionary file not found: {path}"])
        return asdict(rep)

    issues: List[str] = []
    words: List[str] = []
    invalid = 0
    examples: List[str] = []

    with p.open("r", encoding="utf-8") as f:
        for raw in f:
            if not raw.strip():
                continue
            try:
                words.append(parse_record(raw).word)
            except InvalidInput:
                invalid += 1
                if len(examples) < 5:
                    examples.append(raw.strip())

    unique = set(words)
    if not words:
        issues.append("dictionary contains 0 valid records")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid line(s) (e.g., {examples})")
    if len(unique) != len(words):
        issues.append(f"dictionary contains {len(words) - len(unique)} duplicate word(s)")

    rep = DictionaryReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        dictionary=12947 (uniq=12947, invalid=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"dictionary={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
