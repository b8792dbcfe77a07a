import pytest
import pytest_asyncio
from faker import Faker
from faker.providers import address, internet, misc

from bikeshare.models import Bike, User
from bikeshare.service import NaclCrypt, RentalService
from tests.util import FakeClock

fake = Faker()
fake.add_provider(address)
fake.add_provider(internet)
fake.add_provider(misc)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(scope="session")
def crypt() -> NaclCrypt:
    return NaclCrypt("min")


@pytest.fixture
def rental_service(crypt, clock) -> RentalService:
    return RentalService(crypt, clock)


@pytest.fixture
def random_user_factory():
    def create_user(password=None):
        return User(fake.name(), fake.unique.email(), password if password is not None else fake.password())

    return create_user


@pytest.fixture
def random_bike_factory():
    def create_bike(rate=100.0):
        return Bike(
            fake.word(), "mountain bike", 1234, 1234, rate,
            fake.sentence(), 5, [fake.image_url()]
        )

    return create_bike


@pytest.fixture
def random_user(random_user_factory) -> User:
    return random_user_factory()


@pytest.fixture
def random_bike(random_bike_factory) -> Bike:
    return random_bike_factory()


@pytest_asyncio.fixture
async def registered_user(rental_service, random_user) -> User:
    """Registers a random user with the service."""
    return await rental_service.register_user(random_user)


@pytest.fixture
def registered_bike(rental_service, random_bike) -> Bike:
    """Registers a random bike with the service."""
    return rental_service.register_bike(random_bike)
