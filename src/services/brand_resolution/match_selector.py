import logging
from typing import Iterable, List, Optional

from services.brand_resolution.models import (
    BrandResolution,
    GroupIndex,
    MatchCandidate,
)
from services.brand_resolution.title_matcher import check_brand_match

logger = logging.getLogger(__name__)


def collect_candidates(title: str, brands: Iterable[str]) -> List[MatchCandidate]:
    candidates: List[MatchCandidate] = []
    for brand in brands:
        result = check_brand_match(title, brand)
        if not result.is_valid:
            continue
        candidates.append(
            MatchCandidate(
                brand=brand,
                match_index=result.match_index,
                is_beginning=result.match_index == 0,
            )
        )
    return candidates


def select_best_match(candidates: List[MatchCandidate]) -> Optional[MatchCandidate]:
    """Prefer a match at the start of the title, then the earliest word."""
    if not candidates:
        return None
    return sorted(candidates, key=MatchCandidate.sort_key)[0]


def resolve_canonical_brand(brand: str, group_index: GroupIndex) -> str:
    group = group_index.get(brand)
    if group is None:
        logger.warning(f"Matched brand '{brand}' has no group, using it as its own canonical name")
        return brand
    return group.canonical_brand


def resolve_title_brand(title: str, group_index: GroupIndex) -> Optional[BrandResolution]:
    """Find the best known brand in a title and map it to its canonical name."""
    best = select_best_match(collect_candidates(title, group_index.brands()))
    if best is None:
        return None
    return BrandResolution(
        matched_brand=best.brand,
        canonical_brand=resolve_canonical_brand(best.brand, group_index),
        match_index=best.match_index,
    )
