from datetime import datetime
from typing import List
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from ..db import get_db
from ..security import require_user_id
from ..services.booking import create_booking, list_bookings

router = APIRouter(tags=["bookings"])

# ==== Schemas ====

class BookIn(BaseModel):
    roomId: int = Field(gt=0, le=2**63 - 1)
    checkIn: str
    checkOut: str
    roomCount: int = Field(gt=0, le=2**31 - 1)

class BookOut(BaseModel):
    message: str
    total: int

class BookingOut(BaseModel):
    id: int
    userId: int
    roomId: int
    checkIn: str
    checkOut: str
    bookingDate: datetime
    roomCount: int
    total: int
    hotel_name: str
    location: str
    name: str
    amenities: List[str]

# ==== Endpoints ====

@router.post("/book", response_model=BookOut)
def book(payload: BookIn, user_id: int = Depends(require_user_id), db: Session = Depends(get_db)):
    booking = create_booking(db, user_id, payload.roomId, payload.checkIn, payload.checkOut, payload.roomCount)
    return {"message": "Booking successful", "total": booking.total}


@router.get("/bookings", response_model=List[BookingOut])
def bookings_index(user_id: int = Depends(require_user_id), db: Session = Depends(get_db)):
    return list_bookings(db, user_id)
