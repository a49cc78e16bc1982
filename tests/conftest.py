"""Shared fixtures for brand resolution tests."""

import os
import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool


def ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.append(str(src_path))


ensure_src_on_path()

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from models import Base, BrandRelationRecord
from services.brand_enrichment import build_group_index


@pytest.fixture(scope="function")
def db_engine():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine):
    connection = db_engine.connect()
    transaction = connection.begin()
    session = Session(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture
def relation_records():
    return [
        BrandRelationRecord(manufacturer_p1="abc", manufacturers_p2="xyz;def"),
        BrandRelationRecord(manufacturer_p1="Ultra", manufacturers_p2="ultra pharma"),
        BrandRelationRecord(manufacturer_p1="happy", manufacturers_p2="happy labs"),
        BrandRelationRecord(manufacturer_p1="nenê", manufacturers_p2=""),
        BrandRelationRecord(manufacturer_p1="bio", manufacturers_p2="bio farma"),
    ]


@pytest.fixture
def group_index(relation_records):
    return build_group_index(relation_records)
