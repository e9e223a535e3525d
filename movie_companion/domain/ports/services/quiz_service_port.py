from abc import ABC, abstractmethod

from movie_companion.domain.models.quiz import QuizQuestion


class QuizServicePort(ABC):
    """Port for quiz question generation"""

    @abstractmethod
    async def generate_question(self, user_id: int) -> QuizQuestion:
        """Build a question about one of the user's favorites, rotating through them"""
        pass
