"""
Shared pytest fixtures for all tests.

This module provides common fixtures for database sessions, the FastAPI
app wired to an in-memory database, authenticated users and test data.
"""

import os
import uuid
from decimal import Decimal
from typing import AsyncGenerator

# Test environment must be in place before any gooddeal module reads settings
os.environ["ENVIRONMENT"] = "test"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-for-unit-tests-only"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ.pop("ADMIN_EMAIL", None)
os.environ.pop("ADMIN_PASSWORD", None)
os.environ.pop("SENTRY_DSN", None)

import httpx  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from gooddeal.core.app_factory import create_app  # noqa: E402
from gooddeal.database.async_db import get_async_db  # noqa: E402
from gooddeal.models.db import Base, Product  # noqa: E402
from gooddeal.services import AuthResult, TokenService, UserService  # noqa: E402

ADMIN_EMAIL = "admin@shop.com"
ADMIN_PASSWORD = "admin-pass-123"
CUSTOMER_EMAIL = "alice@shop.com"
CUSTOMER_PASSWORD = "alice-pass-123"


# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest_asyncio.fixture
async def async_engine():
    """In-memory SQLite engine with the full schema."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def async_session_factory(async_engine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory."""
    return async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def db_session(async_session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Session for arranging data and inspecting results directly."""
    async with async_session_factory() as session:
        yield session


# ============================================================================
# SERVICE FIXTURES
# ============================================================================


@pytest.fixture
def token_service() -> TokenService:
    return TokenService()


@pytest.fixture
def user_service(db_session, token_service) -> UserService:
    return UserService(db_session, token_service=token_service)


@pytest_asyncio.fixture
async def customer(user_service) -> AuthResult:
    """Registered customer with a valid token."""
    return await user_service.register("Alice", CUSTOMER_EMAIL, CUSTOMER_PASSWORD)


@pytest_asyncio.fixture
async def admin(user_service, token_service) -> AuthResult:
    """Admin account with a valid token."""
    user = await user_service.ensure_admin(ADMIN_EMAIL, ADMIN_PASSWORD, "Shop Admin")
    return AuthResult(token=token_service.create_access_token(user.id), user=user)


# ============================================================================
# DATA FIXTURES
# ============================================================================


def product_fields(**overrides) -> dict:
    """Valid product fields for API payloads and use cases."""
    fields = {
        "name": "Wireless Bluetooth Headphones",
        "description": "High-quality wireless headphones with noise cancellation",
        "price": "99.99",
        "category": "electronics",
        "brand": "SoundMax",
        "stock": 50,
        "images": ["/images/headphones.jpg"],
        "features": ["Noise Cancellation", "30hr Battery"],
    }
    fields.update(overrides)
    return fields


async def add_product(session: AsyncSession, **overrides) -> Product:
    """Insert a product straight into the database."""
    fields = {
        "id": uuid.uuid4(),
        "name": "Cotton T-Shirt",
        "description": "Comfortable 100% cotton t-shirt for everyday wear",
        "price": Decimal("19.99"),
        "category": "clothing",
        "brand": "FashionWear",
        "stock": 100,
        "images": ["/images/tshirt.jpg"],
        "specifications": {},
        "features": [],
        "is_active": True,
    }
    fields.update(overrides)
    product = Product(**fields)
    session.add(product)
    await session.commit()
    await session.refresh(product)
    return product


# ============================================================================
# API FIXTURES
# ============================================================================


@pytest.fixture
def fastapi_app(async_session_factory):
    """FastAPI app whose database dependency uses the in-memory engine."""
    app = create_app()

    async def override_get_async_db() -> AsyncGenerator[AsyncSession, None]:
        async with async_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_async_db] = override_get_async_db
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def api_client(fastapi_app) -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTP client talking to the app in-process."""
    transport = httpx.ASGITransport(app=fastapi_app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def product_payload():
    """Callable building valid product fields with overrides."""
    return product_fields


@pytest.fixture
def product_factory(db_session):
    """Callable inserting a product with overrides."""

    async def factory(**overrides) -> Product:
        return await add_product(db_session, **overrides)

    return factory


@pytest.fixture
def auth_headers():
    """Callable building an Authorization header for a token."""
    return bearer
