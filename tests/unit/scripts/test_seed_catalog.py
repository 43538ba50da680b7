"""
Tests for the demo catalog seed.
"""

import pytest
from sqlalchemy import select

from gooddeal.models.db import Product
from gooddeal.scripts.seed import DEMO_PRODUCTS, seed_catalog


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_seed_replaces_active_catalog(db_session, product_factory):
    # Arrange
    old = await product_factory(name="Old Stock")

    # Act
    seeded = await seed_catalog(db_session)
    await db_session.commit()

    # Assert
    assert len(seeded) == len(DEMO_PRODUCTS)
    await db_session.refresh(old)
    assert old.is_active is False

    active = (await db_session.execute(select(Product).where(Product.is_active.is_(True)))).scalars().all()
    assert {product.name for product in active} == {data["name"] for data in DEMO_PRODUCTS}


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_seed_can_run_twice(db_session):
    await seed_catalog(db_session)
    await db_session.commit()
    await seed_catalog(db_session)
    await db_session.commit()

    active = (await db_session.execute(select(Product).where(Product.is_active.is_(True)))).scalars().all()
    everything = (await db_session.execute(select(Product))).scalars().all()
    assert len(active) == len(DEMO_PRODUCTS)
    assert len(everything) == 2 * len(DEMO_PRODUCTS)
