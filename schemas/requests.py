from pydantic import BaseModel
from typing import Optional


# Fields are optional so that missing values (or a missing body) reach the handler and map to 400
class CreateBookRequest(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None


class UpdateBookRequest(BaseModel):
    id: Optional[int] = None
    title: Optional[str] = None
    content: Optional[str] = None


class AdminLoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
