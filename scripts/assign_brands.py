"""Script to assign canonical brands to unclassified products."""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from config import settings
from models import SessionLocal, init_db
from services import (
    DatabaseMappingSink,
    InMemoryMappingSink,
    assign_brand_if_known,
    build_group_index,
    load_brand_relations,
    load_products,
)


def main() -> None:
    parser = argparse.ArgumentParser(description="Assign canonical brands to product titles")
    parser.add_argument("--relations", default=settings.relations_file, help="Brand relations JSON file")
    parser.add_argument("--products", default=settings.products_file, help="Product feed JSON file")
    parser.add_argument("--source", default=settings.default_source, help="Product source name")
    parser.add_argument("--country", default=settings.default_country_code, help="Country code")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        help="Resolve brands without writing to the database",
    )
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level.upper())

    group_index = build_group_index(load_brand_relations(args.relations))
    products = load_products(args.products)

    if args.dry_run:
        sink = InMemoryMappingSink()
        summary = assign_brand_if_known(products, group_index, sink, args.source, args.country)
        for key, brand in sink.canonical_brands().items():
            print(f"{key}\t{brand}")
    else:
        init_db()
        db = SessionLocal()
        try:
            sink = DatabaseMappingSink(db)
            summary = assign_brand_if_known(products, group_index, sink, args.source, args.country)
        finally:
            db.close()

    print(
        f"Processed {summary.processed} products, matched {summary.matched} "
        f"in {summary.elapsed_ms:.0f} ms"
    )


if __name__ == "__main__":
    main()
