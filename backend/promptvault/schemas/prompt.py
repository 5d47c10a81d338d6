"""Prompt request/response schemas."""

from typing import Optional
from pydantic import BaseModel, Field

from promptvault.models.prompt import PromptCategory


class PromptCreate(BaseModel):
    title: str
    description: str = ""
    content: str
    category: PromptCategory
    tags: list[str] = []
    price: int = Field(0, ge=0)  # e8s
    is_premium: bool = False
    is_public: bool = True


class PromptUpdate(BaseModel):
    """Partial update. Only fields present in the request are applied.

    Presence is read from ``model_fields_set`` so that an omitted field and
    an explicit value stay distinguishable.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None
    category: Optional[PromptCategory] = None
    tags: Optional[list[str]] = None
    price: Optional[int] = Field(None, ge=0)
    is_premium: Optional[bool] = None
    is_public: Optional[bool] = None

    def supplied(self) -> dict:
        """Return only the fields the caller actually set."""
        return {name: getattr(self, name) for name in self.model_fields_set}


class PromptResponse(BaseModel):
    """Full prompt record, as held by the record store."""

    id: int
    title: str
    description: str
    content: str
    author: str
    category: PromptCategory
    tags: list[str]
    price: int
    is_premium: bool
    is_public: bool
    created_at: int
    updated_at: int
    likes: int
    purchases: int
    rating: float
    total_ratings: int

    class Config:
        from_attributes = True


class RatePromptRequest(BaseModel):
    rating: int  # 1-5 stars, range checked by the rating service


class PurchaseResponse(BaseModel):
    prompt_id: int
    buyer: str
    seller: str
    price: int
    timestamp: int

    class Config:
        from_attributes = True
