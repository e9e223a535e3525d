from pydantic import BaseModel


class Person(BaseModel):
    id: int
    name: str
    department: str = ""
    popularity: float = 0.0
