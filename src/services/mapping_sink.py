import logging
from dataclasses import dataclass
from typing import Dict, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models import ProductBrandMapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedMapping:
    identity_key: str
    canonical_brand: str
    source: str
    country_code: str
    source_id: str


class MappingSink(Protocol):
    def write(self, mapping: ResolvedMapping) -> None:
        ...


class InMemoryMappingSink:
    def __init__(self) -> None:
        self.mappings: Dict[str, ResolvedMapping] = {}

    def write(self, mapping: ResolvedMapping) -> None:
        self.mappings[mapping.identity_key] = mapping

    def canonical_brands(self) -> Dict[str, str]:
        return {key: m.canonical_brand for key, m in self.mappings.items()}


class DatabaseMappingSink:
    """Upsert resolved brands into the product mapping table, one commit per product."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def write(self, mapping: ResolvedMapping) -> None:
        try:
            row = self.db.get(ProductBrandMapping, mapping.identity_key)
            if row is None:
                row = ProductBrandMapping(
                    identity_key=mapping.identity_key,
                    canonical_brand=mapping.canonical_brand,
                    source=mapping.source,
                    country_code=mapping.country_code,
                    source_id=mapping.source_id,
                )
                self.db.add(row)
            else:
                row.canonical_brand = mapping.canonical_brand
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.error(f"Failed to store brand mapping for {mapping.identity_key}")
            raise
