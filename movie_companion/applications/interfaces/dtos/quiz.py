from typing import List

from pydantic import BaseModel, ConfigDict


class QuizOptionResponse(BaseModel):
    id: int
    text: str
    model_config = ConfigDict(from_attributes=True)


class QuizQuestionResponse(BaseModel):
    """Response schema for a quiz question"""

    prompt: str
    options: List[QuizOptionResponse]
    correct_option_id: int
    model_config = ConfigDict(from_attributes=True)
