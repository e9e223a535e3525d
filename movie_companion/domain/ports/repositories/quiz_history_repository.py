from abc import ABC, abstractmethod
from typing import AsyncContextManager, List


class QuizHistoryRepository(ABC):
    """Per-user record of the movies already used for quiz questions.

    Callers that read the history and then write it back must hold ``lock(user_id)``
    for the whole sequence. Locks are per user, so different users never wait on
    each other.
    """

    @abstractmethod
    def lock(self, user_id: int) -> AsyncContextManager:
        pass

    @abstractmethod
    async def get(self, user_id: int) -> List[int]:
        pass

    @abstractmethod
    async def append(self, user_id: int, movie_id: int) -> None:
        pass

    @abstractmethod
    async def reset(self, user_id: int) -> None:
        pass
