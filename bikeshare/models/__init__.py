"""
The models package contains the plain data holders used by the service.

.. autoclasstree:: bikeshare.models
"""

from .bike import Bike
from .location import Location
from .rent import Rent
from .user import User
