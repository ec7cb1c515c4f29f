"""Load extra common passwords from a plain-text file (one per line)."""

import logging
from typing import FrozenSet, Optional

from .analyzer import COMMON_PASSWORDS, PasswordAnalyzer

logger = logging.getLogger(__name__)


def load_wordlist(path: str) -> FrozenSet[str]:
    """Entries from path, stripped and lowercased; empty if the file is missing or unreadable."""
    words = set()
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                word = line.strip().lower()
                if word:
                    words.add(word)
    except FileNotFoundError:
        logger.warning("Wordlist file not found at %s.", path)
        return frozenset()
    except (OSError, ValueError) as e:
        logger.warning("Could not read wordlist %s: %s", path, e)
        return frozenset()
    return frozenset(words)


def build_analyzer(wordlist_path: Optional[str] = None) -> PasswordAnalyzer:
    """
    Analyzer over the built-in list, extended with wordlist_path if given.
    Without a usable wordlist this is equivalent to the default analyzer.
    """
    if not wordlist_path:
        return PasswordAnalyzer()
    if not isinstance(wordlist_path, str):
        logger.warning("Ignoring wordlist_path %r: expected a file path string", wordlist_path)
        return PasswordAnalyzer()
    extra = load_wordlist(wordlist_path)
    logger.info("Loaded %d extra common passwords from %s", len(extra), wordlist_path)
    return PasswordAnalyzer(COMMON_PASSWORDS | extra)
