"""
Previously used Wordle answers.

What this module does:
- Downloads the past-answers page (requests).
- Finds the "All Wordle answers" heading and reads the list that follows it
  (BeautifulSoup), keeping 5-letter alphabetic items only.
- Uppercases, de-duplicates while preserving page order, and leaves out any
  "replay" words the caller wants to keep eligible as answers.
- Also reads the same list back from a plain text file (one word per line).

Typical use:
    html = fetch_used_words_page()
    used = parse_used_words(html, replay=["ABHOR"])
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, List

import requests
from bs4 import BeautifulSoup

from packages.engine import WORD_SIZE, is_word
from .io import read_words

log = logging.getLogger(__name__)

URL = "https://www.rockpapershotgun.com/wordle-past-answers"
SECTION_HEADING = "All Wordle answers"
USER_AGENT = "Chrome"

_LEADING_WORD = re.compile(r"^\s*([A-Za-z]+)")


def unique_preserve_order(words: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def fetch_used_words_page(url: str = URL, timeout: float = 30.0) -> str:
    """GET the past-answers page; raises requests.HTTPError on a bad status."""
    r = requests.get(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
    r.raise_for_status()
    log.info("downloaded %s (%d bytes)", url, len(r.content))
    return r.text


def parse_used_words(html: str, replay: Iterable[str] = ()) -> List[str]:
    """
    Extract the answers listed under the "All Wordle answers" heading.

    Returns an empty list when the heading or its list is missing.
    """
    soup = BeautifulSoup(html, "html.parser")
    heading = soup.find(
        lambda tag: tag.name in ("h2", "h3") and tag.get_text(strip=True) == SECTION_HEADING
    )
    if heading is None:
        log.warning("no '%s' section found on the page", SECTION_HEADING)
        return []
    ul = heading.find_next("ul")
    if ul is None:
        return []

    keep = {w.strip().upper() for w in replay}
    words = []
    for li in ul.find_all("li"):
        m = _LEADING_WORD.match(li.get_text(" ", strip=True))
        if not m or len(m.group(1)) != WORD_SIZE:
            continue
        w = m.group(1).upper()
        if w in keep:
            continue
        words.append(w)

    words = unique_preserve_order(words)
    log.info("found %d used words (%d replay words kept eligible)", len(words), len(keep))
    return words


def load_used_words(path: Path | str) -> List[str]:
    """Used words from a text file; lines that are not 5-letter words are ignored."""
    return unique_preserve_order(w for w in read_words(path) if is_word(w))
