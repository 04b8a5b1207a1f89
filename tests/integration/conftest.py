import pytest_asyncio
from decimal import Decimal
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain  # noqa: F401  registers tables on SQLModel.metadata
from config import ApplicationConfig
from src.depends import get_session
from src.domain.client import Client
from src.domain.product import Product


class TestConfig(ApplicationConfig):
    API_PREFIX = ""
    DB_CREATE_TABLES = False
    ENABLE_SENTRY = False
    BUSINESS_HOME_STATE = "Maharashtra"


@pytest_asyncio.fixture(scope="function")
async def engine():
    """In-memory SQLite engine shared by every connection of one test"""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        echo=False,
        future=True,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    """Create test client with database session override"""
    from src.api.app import create_app

    app = create_app(TestConfig)

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def seeded(db_session):
    """One in-state client, one out-state client and three products"""
    in_state = Client(
        name="Sunrise Orthopaedics",
        email="accounts@sunrise-ortho.in",
        phone="+91 22 4000 1234",
        address={"city": "Pune", "state": "Maharashtra", "country": "India"},
    )
    out_state = Client(
        name="Deccan Rehab",
        email="billing@deccan-rehab.in",
        phone="+91 40 2300 5678",
        address={"city": "Hyderabad", "state": "Telangana", "country": "India"},
    )
    brace = Product(name="Knee Brace", base_price=Decimal("100"), category="Orthotics", sku="KB-01")
    splint = Product(name="Wrist Splint", base_price=Decimal("150"), category="Orthotics", sku="WS-01")
    collar = Product(name="Cervical Collar", base_price=Decimal("275"), category="Orthotics")
    db_session.add_all([in_state, out_state, brace, splint, collar])
    await db_session.commit()
    for entity in (in_state, out_state, brace, splint, collar):
        await db_session.refresh(entity)

    return {
        "in_state": in_state.id,
        "out_state": out_state.id,
        "brace": brace.id,
        "splint": splint.id,
        "collar": collar.id,
        "products": [brace.id, splint.id, collar.id],
    }
