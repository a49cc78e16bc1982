"""
Brand enrichment run over a product feed.

Builds the brand group index once, then resolves the brand of every product
that has no classification yet and forwards matches to a mapping sink.
"""

import logging
import time
import uuid
from dataclasses import dataclass
from typing import Iterable

from models.schemas import BrandRelationRecord, ProductRecord
from services.brand_resolution import (
    GroupIndex,
    build_brand_graph,
    build_brand_groups,
    resolve_title_brand,
)
from services.mapping_sink import MappingSink, ResolvedMapping

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    processed: int = 0
    matched: int = 0
    skipped: int = 0
    unmatched: int = 0
    failed: int = 0
    elapsed_ms: float = 0.0


def build_group_index(relations: Iterable[BrandRelationRecord]) -> GroupIndex:
    return build_brand_groups(build_brand_graph(relations))


def product_identity_key(source: str, country_code: str, source_id: str) -> str:
    """Deterministic UUID for a product within a source and country."""
    return str(uuid.uuid5(uuid.NAMESPACE_URL, f"{source}_{country_code}_{source_id}"))


def _process_product(
    product: ProductRecord,
    group_index: GroupIndex,
    sink: MappingSink,
    source: str,
    country_code: str,
) -> bool:
    resolution = resolve_title_brand(product.title, group_index)
    if resolution is None:
        logger.debug(f"{product.title} -> no match")
        return False

    logger.debug(f"{product.title} -> {resolution.canonical_brand}")
    sink.write(
        ResolvedMapping(
            identity_key=product_identity_key(source, country_code, product.source_id),
            canonical_brand=resolution.canonical_brand,
            source=source,
            country_code=country_code,
            source_id=product.source_id,
        )
    )
    return True


def assign_brand_if_known(
    products: Iterable[ProductRecord],
    group_index: GroupIndex,
    sink: MappingSink,
    source: str,
    country_code: str,
) -> RunSummary:
    """Resolve canonical brands for unclassified products and send them to the sink."""
    summary = RunSummary()
    start = time.perf_counter()

    for product in products:
        summary.processed += 1

        if product.is_classified:
            summary.skipped += 1
            continue

        try:
            if _process_product(product, group_index, sink, source, country_code):
                summary.matched += 1
            else:
                summary.unmatched += 1
        except Exception:
            summary.failed += 1
            logger.exception(f"Failed to assign brand for product {product.source_id}")

    summary.elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"Execution time: {summary.elapsed_ms:.0f} ms")
    logger.info(
        f"Processed {summary.processed} products, matched {summary.matched}, "
        f"skipped {summary.skipped}, unmatched {summary.unmatched}, failed {summary.failed}"
    )
    return summary
