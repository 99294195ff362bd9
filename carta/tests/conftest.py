"""Test configuration for API tests."""

import pathlib
import sys
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

sys.path.append(str(pathlib.Path(__file__).resolve().parents[2]))

import carta.app.db as app_db  # noqa: E402
from carta.app.deps import get_now  # noqa: E402
from carta.app.models import Category, MenuItem, Restaurant  # noqa: E402

SANTIAGO = ZoneInfo("America/Santiago")


class FrozenClock:
    """Mutable request clock installed as the ``get_now`` override."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def session_factory():
    factory, engine = app_db.create_test_session()
    original = app_db.SessionLocal
    app_db.SessionLocal = factory
    yield factory
    app_db.SessionLocal = original
    engine.dispose()


@pytest.fixture
def clock() -> FrozenClock:
    # Friday 18:00 in Santiago
    return FrozenClock(datetime(2024, 1, 5, 18, 0, tzinfo=SANTIAGO))


@pytest.fixture
def client(session_factory, clock):
    from fastapi.testclient import TestClient

    from carta.app.main import app

    app.dependency_overrides[get_now] = clock
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def restaurant(session_factory) -> dict:
    """Seed a Santiago restaurant with drinks and mains."""

    with session_factory() as session:
        r = Restaurant(slug="la-picada", name="La Picada", timezone="America/Santiago")
        session.add(r)
        session.flush()
        drinks = Category(restaurant_id=r.id, name="Bebidas", position=0)
        mains = Category(restaurant_id=r.id, name="Platos", position=1)
        session.add_all([drinks, mains])
        session.flush()
        pisco = MenuItem(
            restaurant_id=r.id, category_id=drinks.id, name="Pisco sour", base_price=5900
        )
        lomo = MenuItem(
            restaurant_id=r.id, category_id=mains.id, name="Lomo", price=12900, position=1
        )
        session.add_all([pisco, lomo])
        session.commit()
        return {
            "id": r.id,
            "slug": r.slug,
            "drinks": drinks.id,
            "mains": mains.id,
            "pisco": pisco.id,
            "lomo": lomo.id,
        }
