import json
import logging
from pathlib import Path
from sqlalchemy import func
from sqlalchemy.orm import Session

from ..config import settings
from ..models import Room, User
from .accounts import create_user

logger = logging.getLogger(__name__)

DEFAULT_ROOMS = [
    {"hotel_name": "Hotel Sea View", "location": "Puri", "name": "Standard Room", "price": 1500, "available": 5, "image": "/images/Puri/Hotel Sea View/room_standard.jpg", "amenities": ["Wi-Fi", "TV", "AC"]},
    {"hotel_name": "Hotel Sea View", "location": "Puri", "name": "Deluxe Room", "price": 2500, "available": 3, "image": "/images/Puri/Hotel Sea View/room_deluxe.jpg", "amenities": ["Wi-Fi", "TV", "AC", "Sea View"]},
    {"hotel_name": "Golden Sands Resort", "location": "Puri", "name": "Family Suite", "price": 4000, "available": 2, "image": "/images/Puri/Golden Sands Resort/family_suite.jpg", "amenities": ["Wi-Fi", "TV", "AC", "Mini Bar"]},
    {"hotel_name": "Temple Town Inn", "location": "Bhubaneswar", "name": "Standard Room", "price": 1200, "available": 6, "image": "/images/Bhubaneswar/Temple Town Inn/room_standard.jpg", "amenities": ["Wi-Fi", "TV"]},
    {"hotel_name": "Temple Town Inn", "location": "Bhubaneswar", "name": "Executive Room", "price": 2200, "available": 4, "image": "/images/Bhubaneswar/Temple Town Inn/room_executive.jpg", "amenities": ["Wi-Fi", "TV", "AC", "Work Desk"]},
    {"hotel_name": "Lakeside Retreat", "location": "Chilika", "name": "Cottage", "price": 1800, "available": 4, "image": "/images/Chilika/Lakeside Retreat/cottage.jpg", "amenities": ["Wi-Fi", "Lake View", "Breakfast"]},
    {"hotel_name": "Konark Heritage Stay", "location": "Konark", "name": "Heritage Room", "price": 2000, "available": 3, "image": "/images/Konark/Konark Heritage Stay/heritage_room.jpg", "amenities": ["Wi-Fi", "AC", "Breakfast"]},
]


def load_rooms(path: str | None = None) -> list[dict]:
    """Room seed rows from a JSON file, or the bundled list when no file is configured."""
    path = path if path is not None else settings.SEED_ROOMS_FILE
    if not path:
        return DEFAULT_ROOMS
    with Path(path).open(encoding="utf-8") as fh:
        rooms = json.load(fh)
    if not isinstance(rooms, list):
        raise ValueError(f"{path} must contain a JSON array of rooms")
    return rooms


def seed_rooms(db: Session, rooms: list[dict]) -> int:
    if db.query(func.count(Room.id)).scalar():
        logger.info("Rooms table already has data, skipping seeding")
        return 0
    for r in rooms:
        db.add(Room(
            hotel_name=r["hotel_name"],
            location=r["location"],
            name=r["name"],
            price=int(r["price"]),
            available=int(r["available"]),
            image=r.get("image", ""),
            amenities=Room.encode_amenities(r.get("amenities")),
        ))
    db.commit()
    logger.info("Rooms seeded: %d", len(rooms))
    return len(rooms)


def ensure_default_user(db: Session, email: str | None = None, password: str | None = None) -> User:
    email = email or settings.DEFAULT_USER_EMAIL
    password = password or settings.DEFAULT_USER_PASSWORD
    user = db.query(User).filter(User.email == email).first()
    if user:
        return user
    user = create_user(db, email, password)
    logger.info("Default user seeded: %s", email)
    return user


def seed_database(db: Session, rooms_file: str | None = None):
    seed_rooms(db, load_rooms(rooms_file))
    ensure_default_user(db)
