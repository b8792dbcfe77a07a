"""
Bike
-------------------------

Represents a bike in the system. A bike is given a random
hex identifier on creation, of which the first 6 characters
are used as a short, human friendly identifier.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List

from nacl.utils import random

from bikeshare.models.location import Location


def generate_bike_id() -> str:
    return random(16).hex()


@dataclass
class Bike:
    name: str
    type: str
    body_size: int
    max_load: int
    rate: float
    """The price of the bike, per hour."""
    description: str
    ratings: int
    image_urls: List[str]
    available: bool = True
    location: Location = field(default_factory=lambda: Location(0.0, 0.0))
    id: str = field(default_factory=generate_bike_id)

    @property
    def identifier(self) -> str:
        """The 6 character bike identifier."""
        return self.id[:6]

    def serialize(self, *, include_location=False) -> Dict[str, Any]:
        """
        Serializes the bike into a format that can be turned into JSON.

        :param include_location: Whether to include the location even when the bike is rented.
        :return: A dictionary.
        """
        data = {
            "id": self.id,
            "identifier": self.identifier,
            "name": self.name,
            "type": self.type,
            "body_size": self.body_size,
            "max_load": self.max_load,
            "rate": self.rate,
            "description": self.description,
            "ratings": self.ratings,
            "image_urls": list(self.image_urls),
            "available": self.available,
        }

        if self.available or include_location:
            data["current_location"] = self.location.serialize()

        return data

    def __str__(self):
        return f"[{self.type}] {self.identifier}"
