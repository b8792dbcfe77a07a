"""
Event Hub
---------

A hub holds a number of event lists and the handlers subscribed to each event.
"""

from collections import defaultdict
from inspect import signature
from typing import Callable, Dict, List, Type

from .event_list import EventList
from .exceptions import NoSuchEventError, NoSuchListenerError, InvalidHandlerError


class BoundEvent:
    """
    An event accessed through a hub. Supports adding and
    removing handlers with ``+=`` and ``-=``, and emits
    the event when called.
    """

    def __init__(self, hub: 'EventHub', event: Callable):
        self.hub = hub
        self.event = event

    def __iadd__(self, handler):
        self.hub.subscribe(self.event, handler)
        return self

    def __isub__(self, handler):
        self.hub.unsubscribe(self.event, handler)
        return self

    def __call__(self, *args, **kwargs):
        self.hub.emit(self.event, *args, **kwargs)


class EventHub:

    def __init__(self, *event_lists: Type[EventList]):
        self._event_lists: List[Type[EventList]] = []
        self._listeners: Dict[Callable, List[Callable]] = defaultdict(list)
        self.add_events(*event_lists)

    def add_events(self, *event_lists: Type[EventList]):
        for event_list in event_lists:
            if event_list not in self._event_lists:
                self._event_lists.append(event_list)

    def subscribe(self, event: Callable, handler: Callable):
        """
        Subscribes a handler to an event.

        :raises NoSuchEventError: If the event is not on this hub.
        :raises InvalidHandlerError: If the handler can't be called with the event's arguments.
        """
        event = self._resolve(event)
        if event not in self:
            raise NoSuchEventError(f"{event.__name__} is not an event on this hub.")

        arguments = [None] * len(signature(event).parameters)
        try:
            signature(handler).bind(*arguments)
        except TypeError:
            raise InvalidHandlerError(f"{handler} does not match the signature of {event.__name__}.")

        self._listeners[event].append(handler)

    def unsubscribe(self, event: Callable, handler: Callable):
        """
        Removes a handler from an event.

        :raises NoSuchListenerError: If the handler is not subscribed to the event.
        """
        event = self._resolve(event)
        try:
            self._listeners.get(event, []).remove(handler)
        except ValueError:
            raise NoSuchListenerError(f"{handler} is not subscribed to {event.__name__}.")

    def emit(self, event: Callable, *args, **kwargs):
        """
        Calls every handler of the event, in the order they subscribed.

        :raises NoSuchEventError: If the event is not on this hub.
        """
        event = self._resolve(event)
        if event not in self:
            raise NoSuchEventError(f"{event.__name__} is not an event on this hub.")

        for handler in list(self._listeners[event]):
            handler(*args, **kwargs)

    @staticmethod
    def _resolve(event):
        return event.event if isinstance(event, BoundEvent) else event

    def __contains__(self, item):
        item = self._resolve(item)
        if isinstance(item, type) and issubclass(item, EventList):
            return item in self._event_lists
        return any(item in event_list for event_list in self._event_lists)

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)

        for event_list in self._event_lists:
            event = getattr(event_list, name, None)
            if event is not None and event in event_list:
                return BoundEvent(self, event)

        raise NoSuchEventError(f"No event named {name} on this hub.")

    def __setattr__(self, name, value):
        # the in-place operators on a bound event assign it back to the hub
        if isinstance(value, BoundEvent) and value.hub is self:
            return
        super().__setattr__(name, value)
