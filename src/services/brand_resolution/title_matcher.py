"""
Single-brand title matching.

Finds every word of a title that refers to a given brand, then keeps only the
occurrences allowed by the positional policy.
"""

from typing import List, Sequence

from constants.brand_rules import IGNORED_BRANDS
from services.brand_resolution.models import BrandMatch
from services.brand_resolution.positional_rules import check_brand_position
from services.brand_resolution.text_utils import (
    brand_boundary_pattern,
    fold_accents,
    fold_brand,
    normalize_brand_key,
    tokenize_title,
)


def should_ignore_brand(brand: str) -> bool:
    return normalize_brand_key(brand) in IGNORED_BRANDS


def find_brand_matches(words: Sequence[str], brand: str) -> List[int]:
    """Return the indices of words that refer to brand, in scan order."""
    brand_lower = brand.lower()
    folded_brand = fold_brand(brand)
    boundary = brand_boundary_pattern(brand)
    matches: List[int] = []

    for index, word in enumerate(words):
        if word == brand or word.lower() == brand_lower:
            matches.append(index)
            continue

        folded_word = fold_accents(word)
        if folded_word == folded_brand:
            matches.append(index)
            continue

        if boundary.search(word) and folded_brand in folded_word:
            matches.append(index)

    return matches


def check_brand_match(title: str, brand: str) -> BrandMatch:
    """Match one brand against a title, preferring an occurrence at the front."""
    if not normalize_brand_key(brand) or should_ignore_brand(brand):
        return BrandMatch.invalid()

    words = tokenize_title(title)
    matches = find_brand_matches(words, brand)
    if not matches:
        return BrandMatch.invalid()

    valid = [index for index in matches if check_brand_position(words, brand, index)]
    if not valid:
        return BrandMatch.invalid()

    best_index = 0 if 0 in valid else valid[0]
    return BrandMatch(is_valid=True, match_index=best_index)
