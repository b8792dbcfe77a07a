"""
Errors
------

The errors raised by the rental service. Each one represents exactly
one kind of failure, tagged with a member of :class:`ErrorKind`.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """The closed set of failures the rental service can report."""

    USER_ALREADY_REGISTERED = "user_already_registered"
    USER_NOT_FOUND = "user_not_found"
    USER_NOT_AUTHENTICATED = "user_not_authenticated"
    BIKE_ALREADY_REGISTERED = "bike_already_registered"
    BIKE_NOT_FOUND = "bike_not_found"
    UNAVAILABLE_BIKE = "unavailable_bike"
    RENT_NOT_FOUND = "rent_not_found"


class RentalServiceError(Exception):
    """The base of every error the rental service raises."""
    kind: ErrorKind
    message = "Rental service error."

    def __init__(self, message=None):
        super().__init__(message if message is not None else self.message)


class UserAlreadyRegisteredError(RentalServiceError):
    kind = ErrorKind.USER_ALREADY_REGISTERED
    message = "Already registered user."


class UserNotFoundError(RentalServiceError):
    kind = ErrorKind.USER_NOT_FOUND
    message = "User not found."


class UserNotAuthenticatedError(RentalServiceError):
    kind = ErrorKind.USER_NOT_AUTHENTICATED
    message = "User not authenticated."


class BikeAlreadyRegisteredError(RentalServiceError):
    kind = ErrorKind.BIKE_ALREADY_REGISTERED
    message = "Already registered bike."


class BikeNotFoundError(RentalServiceError):
    kind = ErrorKind.BIKE_NOT_FOUND
    message = "Bike not found."


class UnavailableBikeError(RentalServiceError):
    """Raised when trying to rent a bike that is already rented."""
    kind = ErrorKind.UNAVAILABLE_BIKE
    message = "Unavailable bike."


class RentNotFoundError(RentalServiceError):
    """Raised when returning a bike that the user has no open rent for."""
    kind = ErrorKind.RENT_NOT_FOUND
    message = "Rent not found."
