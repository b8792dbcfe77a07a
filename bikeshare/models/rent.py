"""
Rent
---------------------------

A rent ties a user to a bike for a period of time. It is
open until the bike is returned, at which point the end
time and the amount charged are filled in.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, Any, Optional

from bikeshare.models.bike import Bike
from bikeshare.models.location import Location
from bikeshare.models.user import User


@dataclass(eq=False)
class Rent:
    bike: Bike
    user: User
    start: datetime
    end: Optional[datetime] = None
    id: Optional[int] = None

    amount: Optional[float] = None
    """The amount charged for the rent, set on return."""

    start_location: Optional[Location] = None
    end_location: Optional[Location] = None

    @property
    def is_open(self) -> bool:
        return self.end is None

    @property
    def duration(self) -> Optional[timedelta]:
        return None if self.end is None else self.end - self.start

    @property
    def distance(self) -> Optional[float]:
        """The distance between the pickup and drop off locations, in kilometres."""
        if self.start_location is None or self.end_location is None:
            return None
        try:
            return self.start_location.distance_to(self.end_location)
        except ValueError:
            return None

    def matches(self, bike: Bike, user: User) -> bool:
        """Checks if the rent is for the given bike and user."""
        return self.bike.id == bike.id and self.user.email == user.email

    def serialize(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "bike_id": self.bike.id,
            "bike_identifier": self.bike.identifier,
            "user_email": self.user.email,
            "start_time": self.start,
            "is_active": self.is_open,
        }

        if self.start_location is not None:
            data["start_location"] = self.start_location.serialize()

        if not self.is_open:
            data["end_time"] = self.end
            data["price"] = self.amount
            if self.end_location is not None:
                data["end_location"] = self.end_location.serialize()
                data["distance"] = self.distance

        return data
