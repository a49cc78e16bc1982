"""
Brand group clustering.

This module groups related brand names into connected components of the
relation graph and picks one deterministic canonical label per component.
"""

import logging
from typing import Dict, Iterable, List, Set

from services.brand_resolution.models import BrandGraph, BrandGroup, GroupIndex

logger = logging.getLogger(__name__)


def canonical_sort_key(brand: str) -> tuple[int, str]:
    return (len(brand), brand)


def select_canonical_brand(brands: Iterable[str]) -> str:
    """Shortest name wins; ties go to the lexicographically smallest."""
    return min(brands, key=canonical_sort_key)


def find_connected_components(graph: BrandGraph) -> List[Set[str]]:
    """Collect connected components with an explicit work stack."""
    visited: Set[str] = set()
    components: List[Set[str]] = []

    for brand in sorted(graph):
        if brand in visited:
            continue

        component: Set[str] = set()
        to_process = [brand]

        while to_process:
            current = to_process.pop()
            if current in visited or current not in graph:
                continue

            visited.add(current)
            component.add(current)
            to_process.extend(related for related in graph[current] if related not in visited)

        components.append(component)

    return components


def build_brand_groups(graph: BrandGraph) -> GroupIndex:
    """Index every brand in the graph by the group it belongs to."""
    groups: Dict[str, BrandGroup] = {}
    components = find_connected_components(graph)

    for component in components:
        group = BrandGroup(
            canonical_brand=select_canonical_brand(component),
            all_brands=frozenset(component),
        )
        for brand in component:
            groups[brand] = group

    logger.info(f"Built {len(components)} brand groups covering {len(groups)} brands")
    return GroupIndex(groups)
