"""
The pricing module determines the price for a bike rented for a certain time.
Bikes are billed by the hour at their own rate, and any fraction of an hour
is billed proportionally.
"""

from datetime import datetime, timedelta

HOUR = timedelta(hours=1)


def get_price(start_date: datetime, end_date: datetime, rate: float) -> float:
    """
    Given the start and end of a rent and the hourly rate of the bike, returns the price.

    :return: The final price, unrounded.
    """
    hours = (end_date - start_date) / HOUR
    return hours * rate
