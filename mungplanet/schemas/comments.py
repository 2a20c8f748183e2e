from datetime import datetime
from pydantic import BaseModel, ConfigDict
from typing import Optional

class CommentIn(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    text: str
    password: str

class CommentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    post_id: int
    name: Optional[str] = None
    text: str
    password: str
    created_at: Optional[datetime] = None
