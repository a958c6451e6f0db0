"""Shared fixtures: every test runs against a fresh in-memory SQLite database."""

import os

# Must be set before app.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from app.database import Base, SessionLocal, engine, create_tables
from app.main import app


@pytest.fixture(autouse=True)
def _schema():
    create_tables()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    # Context manager runs the startup hook (table creation + region seeding)
    with TestClient(app) as c:
        yield c


def make_car(**overrides) -> dict:
    payload = {
        "name": "BMW M3",
        "brand": "BMW",
        "category": "Sedan",
        "pricePerDay": 120,
        "imageUrl": "https://img.example.com/m3.jpg",
        "gallery": [f"https://img.example.com/m3-{i}.jpg" for i in range(4)],
        "equipment": ["GPS", "Bluetooth"],
    }
    payload.update(overrides)
    return payload


def make_booking(car_id: int, **overrides) -> dict:
    payload = {
        "carType": car_id,
        "placeOfRental": "Toshkent",
        "placeOfReturn": "Samarqand",
        "rentalDate": "2026-11-01T10:00:00",
        "returnDate": "2026-11-05T10:00:00",
        "phoneNumber": "+998901234567",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def car(client) -> dict:
    resp = client.post("/api/cars", json=make_car())
    assert resp.status_code == 201
    return resp.json()
