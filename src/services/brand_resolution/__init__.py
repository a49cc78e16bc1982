"""
Brand resolution for product titles.

This module groups related manufacturer names into canonical brand groups and
detects which known brand a product title refers to, using literal,
case-insensitive and accent-folded matching plus per-brand positional rules.
"""

from services.brand_resolution.models import (
    BrandGraph,
    BrandGroup,
    BrandMatch,
    BrandResolution,
    GroupIndex,
    MatchCandidate,
)
from services.brand_resolution.relation_graph import build_brand_graph, split_secondary_brands
from services.brand_resolution.clustering import (
    build_brand_groups,
    find_connected_components,
    select_canonical_brand,
)
from services.brand_resolution.positional_rules import (
    POSITION_RULES,
    PositionRule,
    check_brand_position,
)
from services.brand_resolution.title_matcher import (
    check_brand_match,
    find_brand_matches,
    should_ignore_brand,
)
from services.brand_resolution.match_selector import (
    collect_candidates,
    resolve_canonical_brand,
    resolve_title_brand,
    select_best_match,
)
from services.brand_resolution.text_utils import (
    fold_accents,
    is_separate_term,
    tokenize_title,
)

__all__ = [
    # Data models
    "BrandGraph",
    "BrandGroup",
    "BrandMatch",
    "BrandResolution",
    "GroupIndex",
    "MatchCandidate",

    # Grouping
    "build_brand_graph",
    "split_secondary_brands",
    "build_brand_groups",
    "find_connected_components",
    "select_canonical_brand",

    # Title matching
    "POSITION_RULES",
    "PositionRule",
    "check_brand_position",
    "check_brand_match",
    "find_brand_matches",
    "should_ignore_brand",

    # Selection
    "collect_candidates",
    "resolve_canonical_brand",
    "resolve_title_brand",
    "select_best_match",

    # Text utilities
    "fold_accents",
    "is_separate_term",
    "tokenize_title",
]
