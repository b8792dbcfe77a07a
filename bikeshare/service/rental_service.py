"""
Rental Service
--------------

This module is what coordinates the users, bikes and rents in the system.

Responsibilities
================

- registering, finding and removing users
- authenticating users
- registering, finding, moving and removing bikes
- renting and returning bikes
- pricing rents

Every check an operation needs is made before anything is changed,
so a failed operation leaves the service as it was.
"""

from datetime import datetime
from itertools import count
from typing import Callable, Dict, List, Optional, Tuple

from bikeshare import logger
from bikeshare.events import EventHub, EventList
from bikeshare.models import Bike, Location, Rent, User
from bikeshare.pricing import get_price
from bikeshare.service.crypt import Crypt, NaclCrypt
from bikeshare.service.errors import (
    BikeAlreadyRegisteredError, BikeNotFoundError, RentNotFoundError, UnavailableBikeError,
    UserAlreadyRegisteredError, UserNotAuthenticatedError, UserNotFoundError
)
from bikeshare.version import __version__, name


class RentalEvent(EventList):

    @staticmethod
    def user_registered(user: User):
        """A new user was registered."""

    @staticmethod
    def user_removed(user: User):
        """A user was removed."""

    @staticmethod
    def bike_registered(bike: Bike):
        """A new bike was registered."""

    @staticmethod
    def bike_removed(bike: Bike):
        """A bike was removed."""

    @staticmethod
    def bike_moved(bike: Bike, origin: Location, destination: Location, distance: Optional[float]):
        """A bike was moved to a new location. The distance is None when it can not be measured."""

    @staticmethod
    def rent_started(rent: Rent):
        """A new rent was started."""

    @staticmethod
    def rent_ended(rent: Rent, amount: float):
        """A rent was ended and priced."""


class RentalService:
    """
    Owns every user, bike and rent in the system.

    Publishes events on its hub after each change, so that
    other modules can stay up to date with the system.
    """

    def __init__(self, crypt: Crypt = None, clock: Callable[[], datetime] = datetime.now):
        self.crypt = crypt if crypt is not None else NaclCrypt()
        self.clock = clock
        self.hub = EventHub(RentalEvent)

        self._users: Dict[str, User] = {}
        """Maps emails to users."""

        self._bikes: Dict[str, Bike] = {}
        """Maps bike ids to bikes."""

        self._rents: List[Rent] = []
        """Every rent, in the order they were started."""

        self._rent_ids = count(1)

        logger.debug("Created %s %s rental service", name, __version__)

    @property
    def users(self) -> List[User]:
        return list(self._users.values())

    @property
    def bikes(self) -> List[Bike]:
        return list(self._bikes.values())

    @property
    def rents(self) -> List[Rent]:
        return list(self._rents)

    async def register_user(self, user: User) -> User:
        """
        Registers a user, replacing their password with its protected form.

        :raises UserAlreadyRegisteredError: If a user with that email exists.
        """
        if user.email in self._users:
            logger.debug("Rejected registration of %s, email in use", user.email)
            raise UserAlreadyRegisteredError

        protected = await self.crypt.protect(user.password)

        # another registration may have completed while hashing
        if user.email in self._users:
            raise UserAlreadyRegisteredError

        user.password = protected
        self._users[user.email] = user
        logger.info("Registered user %s", user)
        self.hub.emit(RentalEvent.user_registered, user)
        return user

    def find_user(self, email: str) -> User:
        """
        :raises UserNotFoundError: If there is no user with that email.
        """
        try:
            return self._users[email]
        except KeyError:
            raise UserNotFoundError

    def remove_user(self, email: str):
        """
        Removes a user. Their rents stay in the history, and an open
        rent can be returned once the email is registered again.

        :raises UserNotFoundError: If there is no user with that email.
        """
        user = self.find_user(email)
        del self._users[email]
        logger.info("Removed user %s", user)
        self.hub.emit(RentalEvent.user_removed, user)

    def authenticate(self, email: str, password: str) -> User:
        """
        Checks a user's password.

        :raises UserNotFoundError: If there is no user with that email.
        :raises UserNotAuthenticatedError: If the password is wrong.
        """
        user = self.find_user(email)
        if not self.crypt.matches(password, user.password):
            logger.debug("Failed authentication for %s", email)
            raise UserNotAuthenticatedError
        return user

    def register_bike(self, bike: Bike) -> Bike:
        """
        Registers a bike. A bike that comes back while it still has an
        open rent stays unavailable until that rent is returned.

        :raises BikeAlreadyRegisteredError: If a bike with that id exists.
        """
        if bike.id in self._bikes:
            logger.debug("Rejected registration of bike %s, id in use", bike.id)
            raise BikeAlreadyRegisteredError

        bike.available = not any(rent.is_open and rent.bike.id == bike.id for rent in self._rents)
        self._bikes[bike.id] = bike
        logger.info("Registered bike %s", bike)
        self.hub.emit(RentalEvent.bike_registered, bike)
        return bike

    def find_bike(self, bike_id: str) -> Bike:
        """
        :raises BikeNotFoundError: If there is no bike with that id.
        """
        try:
            return self._bikes[bike_id]
        except KeyError:
            raise BikeNotFoundError

    def remove_bike(self, bike_id: str):
        """
        Removes a bike. Its rents stay in the history.

        :raises BikeNotFoundError: If there is no bike with that id.
        """
        bike = self.find_bike(bike_id)
        del self._bikes[bike_id]
        logger.info("Removed bike %s", bike)
        self.hub.emit(RentalEvent.bike_removed, bike)

    def move_bike_to(self, bike_id: str, location: Location):
        """
        Places a bike at a new location.

        :raises BikeNotFoundError: If there is no bike with that id.
        """
        bike = self.find_bike(bike_id)
        origin = bike.location

        try:
            distance = origin.distance_to(location)
        except ValueError:
            # geodesic rejects coordinates outside the valid ranges
            distance = None

        bike.location = location
        logger.debug("Moved bike %s from %s to %s (%s km)", bike, origin, location, distance)
        self.hub.emit(RentalEvent.bike_moved, bike, origin, location, distance)

    def rent_bike(self, bike_id: str, email: str) -> Rent:
        """
        Starts a rent of the given bike for the given user.

        :raises BikeNotFoundError: If there is no bike with that id.
        :raises UserNotFoundError: If there is no user with that email.
        :raises UnavailableBikeError: If the bike is already rented.
        """
        bike = self.find_bike(bike_id)
        user = self.find_user(email)

        if not bike.available:
            logger.debug("Rejected rent of %s by %s, bike unavailable", bike, user)
            raise UnavailableBikeError

        bike.available = False
        rent = Rent(
            id=next(self._rent_ids), bike=bike, user=user,
            start=self.clock(), start_location=bike.location
        )
        self._rents.append(rent)

        logger.info("Started rent %s of %s by %s", rent.id, bike, user)
        self.hub.emit(RentalEvent.rent_started, rent)
        return rent

    def return_bike(self, bike_id: str, email: str) -> float:
        """
        Completes the open rent of the given bike by the given user.

        :return: The amount charged for the rent.
        :raises BikeNotFoundError: If there is no bike with that id.
        :raises UserNotFoundError: If there is no user with that email.
        :raises RentNotFoundError: If the user has no open rent of the bike.
        """
        bike, user, rent = self._resolve_open_rent(bike_id, email)

        end = self.clock()
        amount = get_price(rent.start, end, bike.rate)

        bike.available = True
        rent.end = end
        rent.end_location = bike.location
        rent.amount = amount

        logger.info("Ended rent %s of %s by %s for %s", rent.id, bike, user, amount)
        self.hub.emit(RentalEvent.rent_ended, rent, amount)
        return amount

    def price_estimate(self, bike_id: str, email: str) -> float:
        """
        Gets the price of an open rent so far.

        :raises BikeNotFoundError: If there is no bike with that id.
        :raises UserNotFoundError: If there is no user with that email.
        :raises RentNotFoundError: If the user has no open rent of the bike.
        """
        bike, user, rent = self._resolve_open_rent(bike_id, email)
        return get_price(rent.start, self.clock(), bike.rate)

    def available_bikes(self) -> List[Bike]:
        return [bike for bike in self._bikes.values() if bike.available]

    def open_rents(self) -> List[Rent]:
        return [rent for rent in self._rents if rent.is_open]

    def rents_for_user(self, email: str) -> List[Rent]:
        """
        :raises UserNotFoundError: If there is no user with that email.
        """
        user = self.find_user(email)
        return [rent for rent in self._rents if rent.user.email == user.email]

    def rents_for_bike(self, bike_id: str) -> List[Rent]:
        """
        :raises BikeNotFoundError: If there is no bike with that id.
        """
        bike = self.find_bike(bike_id)
        return [rent for rent in self._rents if rent.bike.id == bike.id]

    def _find_open_rent(self, bike: Bike, user: User) -> Optional[Rent]:
        """Gets the most recent open rent of the bike by the user."""
        for rent in reversed(self._rents):
            if rent.is_open and rent.matches(bike, user):
                return rent
        return None

    def _resolve_open_rent(self, bike_id: str, email: str) -> Tuple[Bike, User, Rent]:
        """Given a bike id and email, "resolves" the bike, user and open rent."""
        bike = self.find_bike(bike_id)
        user = self.find_user(email)

        rent = self._find_open_rent(bike, user)
        if rent is None:
            logger.debug("No open rent of %s by %s", bike, user)
            raise RentNotFoundError

        return bike, user, rent
