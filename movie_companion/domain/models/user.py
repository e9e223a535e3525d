from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class User(BaseModel):
    name: str
    email: str
    password_hash: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None
