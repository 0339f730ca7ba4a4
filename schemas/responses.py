from pydantic import BaseModel


class HealthResponse(BaseModel):
    message: str


class BookResponse(BaseModel):
    id: int
    title: str
    content: str


class MessageResponse(BaseModel):
    success: bool
    message: str


class CreateBookResponse(MessageResponse):
    book_id: int


class BookCountResponse(BaseModel):
    success: bool
    count: int


class LoginResponse(MessageResponse):
    token: str
