"""
Text normalization helpers for brand matching.

Accent folding, title tokenization and whole-term lookup of a brand inside
free text.
"""

import re
import unicodedata
from functools import lru_cache
from typing import List

_WHITESPACE = re.compile(r"\s+")


def normalize_brand_key(brand: str) -> str:
    """Lowercase and trim a brand name for use as a graph key."""
    return (brand or "").lower().strip()


def fold_accents(value: str) -> str:
    """Strip diacritics, lowercase and trim (NFD decomposition, drop combining marks)."""
    decomposed = unicodedata.normalize("NFD", value or "")
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.lower().strip()


def tokenize_title(title: str) -> List[str]:
    """Split a title on whitespace runs, keeping the original casing."""
    return _WHITESPACE.split(title or "")


@lru_cache(maxsize=16384)
def fold_brand(brand: str) -> str:
    """Accent-folded brand name, cached since brands repeat across every title."""
    return fold_accents(brand)


@lru_cache(maxsize=16384)
def brand_boundary_pattern(brand: str) -> re.Pattern:
    return re.compile(rf"\b{re.escape(brand.lower())}\b", re.IGNORECASE)


def is_separate_term(text: str, brand: str) -> bool:
    """Check whether a brand appears in text as a standalone term."""
    if not text or not brand:
        return False
    escaped = re.escape(brand)
    at_edges = re.fullmatch(
        rf"(?:{escaped}\s|.*\s{escaped}\s.*|.*\s{escaped})",
        text,
        flags=re.IGNORECASE | re.DOTALL,
    )
    return bool(at_edges) or bool(re.search(rf"\b{escaped}\b", text, flags=re.IGNORECASE))
