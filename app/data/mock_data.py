from __future__ import annotations

import asyncio
import time
from typing import Awaitable, Callable

from data.models import User, UserCandidate


Sleeper = Callable[[float], Awaitable[None]]
Clock = Callable[[], float]

LIST_DELAY_S = 0.5
CREATE_DELAY_S = 0.3

MOCK_USERS = (
    User(id=1, name="pepe", email="pepe@pepe.com"),
    User(id=2, name="maria", email="maria@maria.com"),
)


class MockDataSource:
    """
    In-memory stand-in for the users service.

    Latency goes through `sleep` and ids through `clock` so tests can swap
    both for fakes and run without real elapsed time.
    """

    def __init__(
        self,
        sleep: Sleeper = asyncio.sleep,
        clock: Clock = time.time,
        list_delay_s: float = LIST_DELAY_S,
        create_delay_s: float = CREATE_DELAY_S,
    ):
        self._sleep = sleep
        self._clock = clock
        self.list_delay_s = list_delay_s
        self.create_delay_s = create_delay_s
        self._last_id = 0

    async def list_users(self) -> list[User]:
        await self._sleep(self.list_delay_s)
        return list(MOCK_USERS)

    def _next_id(self) -> int:
        # Millisecond timestamp, bumped past the last issued id when the clock stalls
        self._last_id = max(int(self._clock() * 1000), self._last_id + 1)
        return self._last_id

    async def create_user(self, candidate: UserCandidate) -> User:
        await self._sleep(self.create_delay_s)
        return User(id=self._next_id(), name=candidate.name, email=candidate.email)


_default_source = MockDataSource()


def get_mock_source() -> MockDataSource:
    return _default_source
