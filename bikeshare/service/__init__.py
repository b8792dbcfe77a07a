"""
.. autoclasstree:: bikeshare.service

The service layer for the system. Acts as the internal API.
Any embedding application should go through the rental
service to register, rent and return bikes.
"""

from .crypt import Crypt, NaclCrypt
from .errors import (
    ErrorKind, RentalServiceError,
    UserAlreadyRegisteredError, UserNotFoundError, UserNotAuthenticatedError,
    BikeAlreadyRegisteredError, BikeNotFoundError, UnavailableBikeError, RentNotFoundError
)
from .rental_service import RentalService, RentalEvent
