import pytest

from bikeshare.events import EventHub, NoSuchEventError, NoSuchListenerError, InvalidHandlerError, EventList


class HandlerCalledError(Exception):
    pass


class ExampleEvents(EventList):

    @staticmethod
    def something_happened(argument):
        """An example event."""


class SecondExampleEvents(EventList):

    @staticmethod
    def something_else_happened(argument):
        """Another event."""


class TestHub:

    @staticmethod
    def handler(argument):
        pass

    @staticmethod
    def invalid_handler():
        pass

    def test_event_list_in_hub(self):
        """Assert that you can check the existence of an event list on a hub."""
        hub = EventHub(ExampleEvents)
        assert ExampleEvents in hub
        assert SecondExampleEvents not in hub

    def test_event_in_hub(self):
        """Assert that you can check the existence of an event on an hub."""
        hub = EventHub(ExampleEvents)
        assert ExampleEvents.something_happened in hub
        assert SecondExampleEvents.something_else_happened not in hub

    def test_add_events(self):
        hub = EventHub(ExampleEvents)
        hub.add_events(SecondExampleEvents)
        assert SecondExampleEvents.something_else_happened in hub

    def test_event_on_hub(self):
        """Assert that an event can be accessed through the hub."""
        hub = EventHub(ExampleEvents)
        assert hub.something_happened.event == ExampleEvents.something_happened

    def test_missing_event_on_hub(self):
        """Assert that getting a non-existent event on a hub raises an error."""
        hub = EventHub()
        with pytest.raises(NoSuchEventError):
            hub.bad_event

    def test_subscribe_to_missing_event(self):
        hub = EventHub(ExampleEvents)
        with pytest.raises(NoSuchEventError):
            hub.subscribe(SecondExampleEvents.something_else_happened, self.handler)

    def test_subscribe_to_event(self):
        """Assert that a handler can be registered on a hub's event."""
        hub = EventHub(ExampleEvents)
        assert sum((len(l) for l in hub._listeners.values()), 0) == 0
        hub.subscribe(ExampleEvents.something_happened, self.handler)
        assert sum((len(l) for l in hub._listeners.values()), 0) != 0

    def test_subscriber_has_similar_signature(self):
        """Assert that a subscriber to an event must have a similar signature."""
        hub = EventHub(ExampleEvents)
        with pytest.raises(InvalidHandlerError):
            hub.subscribe(ExampleEvents.something_happened, self.invalid_handler)

    def test_unsubscribe_from_event(self):
        """Assert that a handler can be unsubscribed from an event."""
        hub = EventHub(ExampleEvents)
        hub.subscribe(hub.something_happened, self.handler)
        hub.unsubscribe(hub.something_happened, self.handler)
        assert not hub._listeners[ExampleEvents.something_happened]

    def test_bad_unsubscribe(self):
        """Assert that unsubscribing a handler that isn't registered fails."""
        hub = EventHub()
        with pytest.raises(NoSuchListenerError):
            hub.unsubscribe(ExampleEvents.something_happened, self.handler)

    def test_trigger_event(self):
        """Assert that handler errors reach the emitter."""
        hub = EventHub(ExampleEvents)

        def raise_listener(argument):
            raise HandlerCalledError("This runs!")

        hub.subscribe(ExampleEvents.something_happened, raise_listener)
        with pytest.raises(HandlerCalledError):
            hub.emit(ExampleEvents.something_happened, argument="test")

    def test_natural_syntax(self):
        """Assert that events can be subscribed to and triggered with the natural syntax."""
        received = []
        hub = EventHub(ExampleEvents)
        hub.something_happened += received.append
        hub.something_happened("test")
        hub.something_happened -= received.append
        hub.something_happened("again")
        assert received == ["test"]

    def test_emit_missing_event(self):
        """Assert that emitting an event that is not on the hub fails."""
        hub = EventHub(ExampleEvents)
        with pytest.raises(NoSuchEventError):
            hub.emit(SecondExampleEvents.something_else_happened, "test")

    def test_bad_unsubscribe_leaves_no_listeners(self):
        hub = EventHub(ExampleEvents)
        with pytest.raises(NoSuchListenerError):
            hub.unsubscribe(SecondExampleEvents.something_else_happened, self.handler)
        assert SecondExampleEvents.something_else_happened not in hub._listeners
