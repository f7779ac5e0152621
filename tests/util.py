from faker import Faker
from faker.providers import internet, misc, person

from bikerent.models import User
from bikerent.service.exceptions import SyncError

fake = Faker()
fake.add_provider(internet)
fake.add_provider(misc)
fake.add_provider(person)

START = 1_700_000_000_000
"""The time the tests start at, in epoch milliseconds."""

HALF_AN_HOUR = 30 * 60 * 1000

TRG_REPUBLIKE = (44.8166, 20.4602)
FAR_AWAY = (44.9, 20.9)


class FakeClock:
    """A clock that only moves when told to."""

    def __init__(self, now=START):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, milliseconds):
        self.now += milliseconds


def random_user(user_id=None) -> User:
    return User(
        id=user_id or f"user_{fake.uuid4()}",
        username=fake.user_name(),
        email=fake.email(),
        first_name=fake.first_name(),
        last_name=fake.last_name(),
        phone=fake.phone_number(),
        created_at=START,
    )


class FakeSync:
    """Stands in for the remote state authority."""

    def __init__(self, state=None, fail=False, upload_url="https://sync.example.com/uploads/rental/photo.jpg"):
        self.state = state
        self.fail = fail
        self.upload_url = upload_url
        self.pushed = []
        self.uploaded = []

    async def pull(self):
        if self.fail or self.state is None:
            raise SyncError("remote is down")
        return self.state

    async def push(self, state):
        if self.fail:
            raise SyncError("remote is down")
        self.pushed.append(state)
        self.state = state

    async def upload_photo(self, local_ref, kind):
        if self.fail:
            raise SyncError("remote is down")
        self.uploaded.append((local_ref, kind))
        return self.upload_url

    async def close(self):
        pass
