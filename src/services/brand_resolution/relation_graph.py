import logging
from typing import Iterable, List

from models.schemas import BrandRelationRecord
from services.brand_resolution.models import BrandGraph
from services.brand_resolution.text_utils import normalize_brand_key

logger = logging.getLogger(__name__)

SECONDARY_SEPARATOR = ";"


def split_secondary_brands(secondary: str) -> List[str]:
    parts = normalize_brand_key(secondary).split(SECONDARY_SEPARATOR)
    return [part.strip() for part in parts if part.strip()]


def build_brand_graph(records: Iterable[BrandRelationRecord]) -> BrandGraph:
    """Build a symmetric adjacency map from manufacturer relation records."""
    graph: BrandGraph = {}
    for record in records:
        primary = normalize_brand_key(record.primary)
        if not primary:
            continue
        graph.setdefault(primary, set())
        for related in split_secondary_brands(record.secondary):
            _add_edge(graph, primary, related)
    logger.debug(f"Built brand graph with {len(graph)} nodes")
    return graph


def _add_edge(graph: BrandGraph, left: str, right: str) -> None:
    graph.setdefault(left, set()).add(right)
    graph.setdefault(right, set()).add(left)
