"""
Positional policy for brand occurrences in product titles.

Short or common brand names only count when they sit at the front of a title.
The policy is an ordered table of rules; the first rule that applies to a
brand decides whether an occurrence at a given word index is valid.
"""

from dataclasses import dataclass
from typing import Callable, List, Sequence

from constants.brand_rules import (
    CASE_SENSITIVE_BRAND_FORMS,
    FRONT_ONLY_BRANDS,
    FRONT_OR_SECOND_BRANDS,
)


@dataclass(frozen=True)
class PositionRule:
    name: str
    applies_to: Callable[[str], bool]
    allows: Callable[[str, Sequence[str], int], bool]


def _literal_form_allowed(brand_key: str, words: Sequence[str], index: int) -> bool:
    if index >= len(words):
        return False
    return words[index] in CASE_SENSITIVE_BRAND_FORMS[brand_key]


POSITION_RULES: List[PositionRule] = [
    PositionRule(
        name="case_sensitive_form",
        applies_to=lambda brand_key: brand_key in CASE_SENSITIVE_BRAND_FORMS,
        allows=_literal_form_allowed,
    ),
    PositionRule(
        name="front_only",
        applies_to=lambda brand_key: brand_key in FRONT_ONLY_BRANDS,
        allows=lambda brand_key, words, index: index == 0,
    ),
    PositionRule(
        name="front_or_second",
        applies_to=lambda brand_key: brand_key in FRONT_OR_SECOND_BRANDS,
        allows=lambda brand_key, words, index: index in (0, 1),
    ),
    PositionRule(
        name="anywhere",
        applies_to=lambda brand_key: True,
        allows=lambda brand_key, words, index: True,
    ),
]


def rule_for_brand(brand: str) -> PositionRule:
    brand_key = brand.lower()
    return next(rule for rule in POSITION_RULES if rule.applies_to(brand_key))


def check_brand_position(words: Sequence[str], brand: str, match_index: int) -> bool:
    """Return True when an occurrence of brand at match_index passes the policy."""
    return rule_for_brand(brand).allows(brand.lower(), words, match_index)
