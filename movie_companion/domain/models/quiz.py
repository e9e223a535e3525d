from typing import List

from pydantic import BaseModel, model_validator

NUM_OPTIONS = 4


class QuizOption(BaseModel):
    id: int
    text: str


class QuizQuestion(BaseModel):
    """Multiple-choice question; option ids are their 1-based positions"""

    prompt: str
    options: List[QuizOption]
    correct_option_id: int

    @model_validator(mode="after")
    def check_options(self) -> "QuizQuestion":
        ids = [option.id for option in self.options]
        if ids != list(range(1, NUM_OPTIONS + 1)):
            raise ValueError(f"A question needs exactly {NUM_OPTIONS} options numbered 1..{NUM_OPTIONS}")
        if self.correct_option_id not in ids:
            raise ValueError("correct_option_id must point at one of the options")
        return self

    @property
    def correct_answer(self) -> str:
        return self.options[self.correct_option_id - 1].text
