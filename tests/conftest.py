import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from hotelbook.db import Base, get_db
from hotelbook.limiter import limiter
from hotelbook.main import app
from hotelbook.models import Room
from hotelbook.security import issue_token
from hotelbook.services.accounts import create_user

# ------------------ engine ------------------
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db

PASSWORD = "password123"


# ------------------ fixtures ------------------
@pytest.fixture(autouse=True)
def reset_db():
    limiter.enabled = False
    limiter.reset()
    Base.metadata.create_all(bind=engine)
    yield
    limiter.enabled = False
    limiter.reset()
    # clean tables after each test
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def lenient_client():
    # Returns the 500 response instead of re-raising unhandled errors
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def user(db):
    return create_user(db, "test@example.com", PASSWORD)


@pytest.fixture
def other_user(db):
    return create_user(db, "other@example.com", "secret456")


@pytest.fixture
def auth_headers(user):
    return {"Authorization": f"Bearer {issue_token(user.id)}"}


def make_room(db, **overrides):
    data = {
        "hotel_name": "Hotel Sea View",
        "location": "Puri",
        "name": "Standard Room",
        "price": 1500,
        "available": 5,
        "image": "/images/Puri/Hotel Sea View/room_standard.jpg",
        "amenities": Room.encode_amenities(["Wi-Fi", "TV", "AC"]),
    }
    data.update(overrides)
    room = Room(**data)
    db.add(room)
    db.commit()
    db.refresh(room)
    return room


@pytest.fixture
def room(db):
    return make_room(db)


@pytest.fixture
def sold_out_room(db):
    return make_room(db, hotel_name="Golden Sands Resort", name="Family Suite", price=4000, available=0)
