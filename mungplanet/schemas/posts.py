import datetime as dt
from pydantic import BaseModel, ConfigDict
from typing import Optional

class PostIn(BaseModel):
    name: Optional[str] = None
    breed: Optional[str] = None
    age: Optional[int] = None
    cause: Optional[str] = None
    message: Optional[str] = None
    date: Optional[str] = None
    password: Optional[str] = None
    is_public: Optional[bool] = None
    expose_until: Optional[dt.date] = None
    lang: Optional[str] = None
    image_url: Optional[str] = None

class PostSummaryOut(BaseModel):
    """Row shape of the public list; message, password and lang are left out."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: Optional[str] = None
    age: Optional[int] = None
    breed: Optional[str] = None
    cause: Optional[str] = None
    date: Optional[str] = None
    image_url: Optional[str] = None
    is_public: bool
    expose_until: Optional[dt.date] = None

class PostOut(PostSummaryOut):
    message: Optional[str] = None
    password: Optional[str] = None
    lang: Optional[str] = None
    created_at: Optional[dt.datetime] = None

class CreatedOut(BaseModel):
    id: int

class PasswordIn(BaseModel):
    password: Optional[str] = None

class SuccessOut(BaseModel):
    success: bool = True
