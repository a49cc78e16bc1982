from models.database import Base, SessionLocal, engine, get_db, init_db
from models.domain import ProductBrandMapping
from models.schemas import BrandRelationRecord, ProductRecord

__all__ = [
    "Base",
    "SessionLocal",
    "engine",
    "get_db",
    "init_db",
    "ProductBrandMapping",
    "BrandRelationRecord",
    "ProductRecord",
]
