import os

# Settings are read at import time; keep tests off the on-disk database
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DEMO_DATA"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from catalog_api.main import app
from catalog_api.api.deps import get_db
from catalog_api.models import Category


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def categories(db):
    food = Category(name="Food")
    mobiles = Category(name="Mobiles")
    db.add_all([food, mobiles])
    db.commit()
    db.refresh(food)
    db.refresh(mobiles)
    return {"Food": food, "Mobiles": mobiles}


def product_payload(**overrides):
    payload = {
        "name": "Cake",
        "description": "Delicious fresh cake.",
        "price": 200.00,
        "imageUrl": "https://picsum.photos/id/100/600/600",
        "totalItemsInStock": 10,
        "categoryId": None,
    }
    payload.update(overrides)
    return payload
