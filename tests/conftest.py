import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import fakeredis

from barbatch.db import Base, get_db
from barbatch.infra import redis_client
from barbatch.main import app
from barbatch.models import Cocktail, CocktailIngredient, LiquorPrice

# --- Test Database Setup ---

SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool  # Share the single in-memory connection across sessions
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# No per-IP limits in tests
app.state.limiter.enabled = False


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_database():
    """Create tables before each test, drop after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """Test client with DB override."""
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def db_session():
    """Direct database session for setup."""
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture(autouse=True)
def mock_redis():
    server = fakeredis.FakeServer()
    redis_client._redis_sync = fakeredis.FakeRedis(server=server, decode_responses=True)
    yield redis_client._redis_sync
    redis_client._redis_sync = None


@pytest.fixture
def delete_password(monkeypatch):
    from barbatch.settings import settings

    monkeypatch.setattr(settings, "delete_recipe_password", "letmein")
    return "letmein"


@pytest.fixture
def vodka_soda(db_session):
    """A stored two-liquid cocktail: 2 oz vodka, 4 oz soda water, 1 lime wedge."""
    cocktail = Cocktail(
        name="Vodka Soda",
        method="Build",
        glass_type="Highball",
        menu_price=12,
        ingredients=[
            CocktailIngredient(name="Vodka", amount="2", unit="oz", preferred_unit="liters", order_index=0),
            CocktailIngredient(name="Soda Water", amount="4", unit="oz", preferred_unit="12oz can", order_index=1),
            CocktailIngredient(name="Lime Wedge", amount="1", unit="each", preferred_unit="each", order_index=2),
        ],
    )
    db_session.add(cocktail)
    db_session.commit()
    db_session.refresh(cocktail)
    return cocktail


@pytest.fixture
def vodka_price(db_session):
    row = LiquorPrice(name="Vodka", bottle_price=22.0, bottle_size_ml=750)
    db_session.add(row)
    db_session.commit()
    return row
