import logging
from sqlalchemy import func
from sqlalchemy.orm import Session

from ..models import Room

logger = logging.getLogger(__name__)


def room_to_dict(room: Room) -> dict:
    return {
        "id": room.id,
        "hotel_name": room.hotel_name,
        "location": room.location,
        "name": room.name,
        "price": room.price,
        "available": room.available,
        "image": room.image,
        "amenities": room.amenity_list,
    }


def list_rooms(db: Session, location: str | None = None) -> list[dict]:
    """
    All rooms, or only those whose location equals ``location`` ignoring case.
    A missing, empty or "all" location means no filter.
    """
    q = db.query(Room)
    if location and location.lower() != "all":
        q = q.filter(func.lower(Room.location) == location.lower())
    rooms = [room_to_dict(r) for r in q.order_by(Room.id.asc()).all()]
    logger.info("Rooms fetched for location %r: %d found", location or "all", len(rooms))
    return rooms
