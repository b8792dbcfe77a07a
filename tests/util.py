from datetime import datetime, timedelta


class FakeClock:
    """A clock that only moves when told to."""

    def __init__(self, start: datetime = None):
        self.now = start if start is not None else datetime(2019, 1, 1, 12)

    def tick(self, delta: timedelta):
        self.now += delta

    def __call__(self) -> datetime:
        return self.now
