"""Load relation and product feeds from JSON exports."""

import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import TypeAdapter

from models.schemas import BrandRelationRecord, ProductRecord

logger = logging.getLogger(__name__)

_RELATIONS = TypeAdapter(List[BrandRelationRecord])
_PRODUCTS = TypeAdapter(List[ProductRecord])


def _read_json(path: Union[str, Path]) -> list:
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Data file not found: {file_path}")
    with file_path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array in {file_path}, got {type(data).__name__}")
    return data


def load_brand_relations(path: Union[str, Path]) -> List[BrandRelationRecord]:
    records = _RELATIONS.validate_python(_read_json(path))
    logger.info(f"Loaded {len(records)} brand relations from {path}")
    return records


def load_products(path: Union[str, Path]) -> List[ProductRecord]:
    products = _PRODUCTS.validate_python(_read_json(path))
    logger.info(f"Loaded {len(products)} products from {path}")
    return products
