from .user import User
from .room import Room
from .booking import Booking
