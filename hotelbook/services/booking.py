import logging
from datetime import datetime, timezone
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import RoomNotFound, InsufficientAvailability, StorageError
from ..models import Booking, Room

logger = logging.getLogger(__name__)


def booking_to_dict(booking: Booking, room: Room) -> dict:
    booking_date = booking.booking_date
    if booking_date.tzinfo is None:
        # sqlite hands back naive values; they are stored as UTC
        booking_date = booking_date.replace(tzinfo=timezone.utc)
    return {
        "id": booking.id,
        "userId": booking.user_id,
        "roomId": booking.room_id,
        "checkIn": booking.check_in,
        "checkOut": booking.check_out,
        "bookingDate": booking_date,
        "roomCount": booking.room_count,
        "total": booking.total,
        "hotel_name": room.hotel_name,
        "location": room.location,
        "name": room.name,
        "amenities": room.amenity_list,
    }


def create_booking(db: Session, user_id: int, room_id: int, check_in: str, check_out: str, room_count: int) -> Booking:
    """
    Books ``room_count`` units of a room for a user and returns the new booking.

    The booking insert and the availability decrement commit together. The
    decrement only applies while enough units remain, so two requests racing
    for the last units cannot both succeed.
    """
    logger.info(
        "Booking request: room %s, check-in %s, check-out %s, count %s, user %s",
        room_id, check_in, check_out, room_count, user_id,
    )
    room = db.get(Room, room_id)
    if not room:
        logger.info("Room %s not found", room_id)
        raise RoomNotFound()
    if room.available < room_count:
        logger.info("Not enough rooms available: room %s has %s, %s requested", room_id, room.available, room_count)
        raise InsufficientAvailability()

    total = room.price * room_count
    booking = Booking(
        user_id=user_id,
        room_id=room.id,
        check_in=check_in,
        check_out=check_out,
        booking_date=datetime.now(timezone.utc),
        room_count=room_count,
        total=total,
    )
    try:
        db.add(booking)
        updated = (
            db.query(Room)
            .filter(Room.id == room.id, Room.available >= room_count)
            .update({Room.available: Room.available - room_count}, synchronize_session=False)
        )
        if updated != 1:
            db.rollback()
            logger.info("Room %s sold out before the booking could be stored", room_id)
            raise InsufficientAvailability()
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Error creating booking for room %s", room_id)
        raise StorageError() from e

    db.refresh(booking)
    logger.info("Booking created: room %s, count %s, total %s, user %s", room_id, room_count, total, user_id)
    return booking


def list_bookings(db: Session, user_id: int) -> list[dict]:
    """The user's bookings joined with their room, newest first."""
    rows = (
        db.query(Booking, Room)
        .join(Room, Booking.room_id == Room.id)
        .filter(Booking.user_id == user_id)
        .order_by(Booking.booking_date.desc(), Booking.id.desc())
        .all()
    )
    bookings = [booking_to_dict(b, r) for b, r in rows]
    logger.info("Bookings fetched for user %s: %d found", user_id, len(bookings))
    return bookings
