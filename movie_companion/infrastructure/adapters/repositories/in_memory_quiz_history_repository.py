import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, List

from movie_companion.domain.ports.repositories.quiz_history_repository import QuizHistoryRepository


class InMemoryQuizHistoryRepository(QuizHistoryRepository):
    """Quiz history kept in process memory.

    State is lost on restart and is not shared between processes, so each replica
    rotates its own copy. Implement QuizHistoryRepository over a shared store for
    multi-instance deployments.

    A user's lock lives only while some request holds or waits for it, so the lock
    table stays as small as the number of users with a quiz in flight.
    """

    def __init__(self):
        self._history: Dict[int, List[int]] = {}
        self._locks: Dict[int, asyncio.Lock] = {}
        self._holders: Dict[int, int] = {}

    @asynccontextmanager
    async def lock(self, user_id: int) -> AsyncIterator[None]:
        user_lock = self._locks.setdefault(user_id, asyncio.Lock())
        self._holders[user_id] = self._holders.get(user_id, 0) + 1
        try:
            async with user_lock:
                yield
        finally:
            self._holders[user_id] -= 1
            if not self._holders[user_id]:
                del self._holders[user_id]
                del self._locks[user_id]

    async def get(self, user_id: int) -> List[int]:
        return list(self._history.get(user_id, []))

    async def append(self, user_id: int, movie_id: int) -> None:
        self._history.setdefault(user_id, []).append(movie_id)

    async def reset(self, user_id: int) -> None:
        self._history[user_id] = []
