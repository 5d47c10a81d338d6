"""User request/response schemas."""

from typing import Optional
from pydantic import BaseModel


class UserCreate(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None


class UserResponse(BaseModel):
    id: str
    username: Optional[str]
    email: Optional[str]
    joined_at: int
    total_earnings: int
    total_spent: int
    prompts_created: int
    prompts_purchased: int

    class Config:
        from_attributes = True


class WhoAmIResponse(BaseModel):
    principal: str
    user: Optional[UserResponse] = None
