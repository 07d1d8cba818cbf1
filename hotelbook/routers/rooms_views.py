from typing import Optional, List
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ..db import get_db
from ..services.catalog import list_rooms

router = APIRouter(tags=["rooms"])

class RoomOut(BaseModel):
    id: int
    hotel_name: str
    location: str
    name: str
    price: int
    available: int
    image: str
    amenities: List[str]

@router.get("/rooms", response_model=List[RoomOut])
def rooms_index(location: Optional[str] = None, db: Session = Depends(get_db)):
    return list_rooms(db, location)
