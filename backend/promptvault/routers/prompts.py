"""Prompts router — CRUD, gated content, purchases, likes, ratings, and search."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from promptvault.database import get_db, serialize_calls
from promptvault.middleware.auth import Clock, get_caller, get_clock
from promptvault.models.prompt import PromptCategory
from promptvault.schemas.envelope import ApiResponse
from promptvault.schemas.prompt import (
    PromptCreate,
    PromptUpdate,
    PromptResponse,
    RatePromptRequest,
)
from promptvault.services import prompt_service, purchase_service, engagement_service

router = APIRouter(
    prefix="/api/prompts",
    tags=["prompts"],
    dependencies=[Depends(serialize_calls), Depends(get_caller)],
)


@router.post("", response_model=ApiResponse[PromptResponse], status_code=201)
def create_prompt(
    req: PromptCreate,
    db: Session = Depends(get_db),
    caller: str = Depends(get_caller),
    clock: Clock = Depends(get_clock),
):
    """Publish a new prompt authored by the caller."""
    prompt = prompt_service.create_prompt(db, caller, clock(), req)
    return ApiResponse.ok(PromptResponse.model_validate(prompt))


@router.get("", response_model=ApiResponse[list[PromptResponse]])
def get_public_prompts(
    db: Session = Depends(get_db),
):
    prompts = prompt_service.get_public_prompts(db)
    return ApiResponse.ok([PromptResponse.model_validate(p) for p in prompts])


@router.get("/search", response_model=ApiResponse[list[PromptResponse]])
def search_prompts(
    q: str = Query(""),
    category: Optional[PromptCategory] = Query(None),
    db: Session = Depends(get_db),
):
    """Search public prompts, ranked by likes, purchases and rating."""
    prompts = prompt_service.search_prompts(db, q, category)
    return ApiResponse.ok([PromptResponse.model_validate(p) for p in prompts])


@router.get("/{prompt_id}", response_model=ApiResponse[PromptResponse])
def get_prompt(
    prompt_id: int,
    db: Session = Depends(get_db),
):
    prompt = prompt_service.get_prompt(db, prompt_id)
    return ApiResponse.ok(PromptResponse.model_validate(prompt))


@router.patch("/{prompt_id}", response_model=ApiResponse[PromptResponse])
def update_prompt(
    prompt_id: int,
    req: PromptUpdate,
    db: Session = Depends(get_db),
    caller: str = Depends(get_caller),
    clock: Clock = Depends(get_clock),
):
    """Update the fields present in the body (author only)."""
    prompt = prompt_service.update_prompt(db, caller, clock(), prompt_id, req)
    return ApiResponse.ok(PromptResponse.model_validate(prompt))


@router.delete("/{prompt_id}", response_model=ApiResponse[str])
def delete_prompt(
    prompt_id: int,
    db: Session = Depends(get_db),
    caller: str = Depends(get_caller),
):
    return ApiResponse.ok(prompt_service.delete_prompt(db, caller, prompt_id))


@router.get("/{prompt_id}/content", response_model=ApiResponse[str])
def get_prompt_content(
    prompt_id: int,
    db: Session = Depends(get_db),
    caller: str = Depends(get_caller),
):
    """Prompt text, for public prompts, the author, or buyers."""
    return ApiResponse.ok(prompt_service.get_prompt_content(db, caller, prompt_id))


@router.post("/{prompt_id}/purchase", response_model=ApiResponse[str])
def purchase_prompt(
    prompt_id: int,
    db: Session = Depends(get_db),
    caller: str = Depends(get_caller),
    clock: Clock = Depends(get_clock),
):
    return ApiResponse.ok(purchase_service.purchase_prompt(db, caller, clock(), prompt_id))


@router.post("/{prompt_id}/like", response_model=ApiResponse[str])
def like_prompt(
    prompt_id: int,
    db: Session = Depends(get_db),
    caller: str = Depends(get_caller),
):
    return ApiResponse.ok(engagement_service.like_prompt(db, caller, prompt_id))


@router.delete("/{prompt_id}/like", response_model=ApiResponse[str])
def unlike_prompt(
    prompt_id: int,
    db: Session = Depends(get_db),
    caller: str = Depends(get_caller),
):
    return ApiResponse.ok(engagement_service.unlike_prompt(db, caller, prompt_id))


@router.post("/{prompt_id}/rating", response_model=ApiResponse[str])
def rate_prompt(
    prompt_id: int,
    req: RatePromptRequest,
    db: Session = Depends(get_db),
    caller: str = Depends(get_caller),
):
    """Rate a prompt 1-5. Re-rating replaces the caller's earlier value."""
    return ApiResponse.ok(engagement_service.rate_prompt(db, caller, prompt_id, req.rating))
