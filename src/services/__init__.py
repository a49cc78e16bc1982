from .brand_enrichment import RunSummary, assign_brand_if_known, build_group_index
from .data_loader import load_brand_relations, load_products
from .mapping_sink import DatabaseMappingSink, InMemoryMappingSink, MappingSink

__all__ = [
    "RunSummary",
    "assign_brand_if_known",
    "build_group_index",
    "load_brand_relations",
    "load_products",
    "DatabaseMappingSink",
    "InMemoryMappingSink",
    "MappingSink",
]
