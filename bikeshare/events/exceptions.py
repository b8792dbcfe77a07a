class NoSuchEventError(AttributeError):
    """Raised when an event is not part of any event list on a hub."""


class NoSuchListenerError(Exception):
    """Raised when removing a handler that was never subscribed."""


class InvalidHandlerError(Exception):
    """Raised when a handler can not accept the arguments of its event."""
