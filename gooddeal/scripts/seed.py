#!/usr/bin/env python3
"""
Replace the catalog with demo products.

Existing products are deactivated rather than deleted so that past orders
keep resolving them.

Usage:
    python -m gooddeal.scripts.seed [--create-tables]
"""

import argparse
import asyncio
import logging

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from gooddeal.database.async_db import dispose_engine, get_async_db_context, init_db
from gooddeal.domains.ecommerce.application.dto import validate_product_data
from gooddeal.models.db import Product

logger = logging.getLogger(__name__)

DEMO_PRODUCTS = [
    {
        "name": "Wireless Bluetooth Headphones",
        "description": "High-quality wireless headphones with noise cancellation",
        "price": "99.99",
        "original_price": "129.99",
        "category": "electronics",
        "brand": "SoundMax",
        "stock": 50,
        "images": ["/images/headphones.jpg"],
        "features": ["Noise Cancellation", "30hr Battery", "Fast Charging"],
    },
    {
        "name": "Smartphone X Pro",
        "description": "Latest smartphone with advanced camera and processor",
        "price": "899.99",
        "category": "electronics",
        "brand": "TechBrand",
        "stock": 25,
        "images": ["/images/phone.jpg"],
        "features": ["5G", "128GB Storage", "Triple Camera"],
    },
    {
        "name": "Cotton T-Shirt",
        "description": "Comfortable 100% cotton t-shirt for everyday wear",
        "price": "19.99",
        "category": "clothing",
        "brand": "FashionWear",
        "stock": 100,
        "images": ["/images/tshirt.jpg"],
        "features": ["100% Cotton", "Machine Wash", "Multiple Colors"],
    },
    {
        "name": "Laptop Backpack",
        "description": "Durable backpack with laptop compartment and water resistance",
        "price": "49.99",
        "original_price": "69.99",
        "category": "electronics",
        "brand": "TravelGear",
        "stock": 30,
        "images": ["/images/backpack.jpg"],
        "features": ["Laptop Compartment", "Water Resistant", "Multiple Pockets"],
    },
]


async def seed_catalog(db: AsyncSession) -> list[Product]:
    """Deactivate the current catalog and insert the demo products."""
    result = await db.execute(update(Product).where(Product.is_active.is_(True)).values(is_active=False))
    logger.info(f"Deactivated {result.rowcount} existing products")

    products = [Product(**validate_product_data(data).model_dump()) for data in DEMO_PRODUCTS]
    db.add_all(products)
    await db.flush()
    return products


async def run(create_tables: bool = False) -> None:
    try:
        if create_tables:
            await init_db()
        async with get_async_db_context() as db:
            products = await seed_catalog(db)
        print(f"Demo products added successfully! ({len(products)} products)")
    finally:
        await dispose_engine()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    parser = argparse.ArgumentParser(description="Replace the catalog with demo products")
    parser.add_argument("--create-tables", action="store_true", help="Create missing tables first")
    args = parser.parse_args()
    asyncio.run(run(create_tables=args.create_tables))


if __name__ == "__main__":
    main()
