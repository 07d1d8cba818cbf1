import json
from sqlalchemy import CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from ..db import Base

class Room(Base):
    __tablename__ = "rooms"
    __table_args__ = (CheckConstraint("available >= 0", name="ck_rooms_available_nonnegative"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    hotel_name: Mapped[str] = mapped_column(String(200), nullable=False)
    location: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    available: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    image: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    # JSON encoded list of strings
    amenities: Mapped[str] = mapped_column(Text, nullable=False, default="[]")

    bookings: Mapped[list["Booking"]] = relationship(back_populates="room")

    @property
    def amenity_list(self) -> list[str]:
        return json.loads(self.amenities) if self.amenities else []

    @staticmethod
    def encode_amenities(amenities) -> str:
        # Accept the stored text form as well as a list
        if isinstance(amenities, str):
            amenities = json.loads(amenities) if amenities.strip() else []
        if amenities is None:
            amenities = []
        if not isinstance(amenities, (list, tuple)) or not all(isinstance(a, str) for a in amenities):
            raise ValueError(f"amenities must be a list of strings, got {amenities!r}")
        return json.dumps(list(amenities))
