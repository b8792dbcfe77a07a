"""
Location
---------------------------
"""

from dataclasses import dataclass
from typing import Dict, Any

from geopy.distance import geodesic
from shapely.geometry import Point, mapping


@dataclass(frozen=True)
class Location:
    """
    A latitude and longitude pair. Locations are
    never changed in place, a bike that moves is
    given a new one.
    """

    latitude: float
    longitude: float

    @property
    def point(self) -> Point:
        """The location as a planar point (x is the longitude)."""
        return Point(self.longitude, self.latitude)

    def distance_to(self, other: 'Location') -> float:
        """The geodesic distance to another location, in kilometres."""
        return geodesic((self.latitude, self.longitude), (other.latitude, other.longitude)).km

    def serialize(self) -> Dict[str, Any]:
        return mapping(self.point)

    def __str__(self):
        return f"{self.latitude},{self.longitude}"
