"""Users router — accounts, dashboards, and per-user indexes."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from promptvault.database import get_db, serialize_calls
from promptvault.middleware.auth import Clock, get_caller, get_clock
from promptvault.schemas.envelope import ApiResponse
from promptvault.schemas.prompt import PromptResponse, PurchaseResponse
from promptvault.schemas.user import UserCreate, UserResponse, WhoAmIResponse
from promptvault.services import user_service, prompt_service, purchase_service, engagement_service

router = APIRouter(
    prefix="/api/users",
    tags=["users"],
    dependencies=[Depends(serialize_calls), Depends(get_caller)],
)


@router.post("", response_model=ApiResponse[UserResponse], status_code=201)
def create_user(
    req: UserCreate,
    db: Session = Depends(get_db),
    caller: str = Depends(get_caller),
    clock: Clock = Depends(get_clock),
):
    """Create the caller's user record."""
    user = user_service.create_user(db, caller, clock(), req.username, req.email)
    return ApiResponse.ok(UserResponse.model_validate(user))


@router.get("/me", response_model=ApiResponse[WhoAmIResponse])
def whoami(
    db: Session = Depends(get_db),
    caller: str = Depends(get_caller),
):
    """Caller principal, plus the user record if one exists."""
    user = user_service.find_user(db, caller)
    return ApiResponse.ok(WhoAmIResponse(
        principal=caller,
        user=UserResponse.model_validate(user) if user else None,
    ))


@router.get("/{user_id}", response_model=ApiResponse[UserResponse])
def get_user(
    user_id: str,
    db: Session = Depends(get_db),
):
    user = user_service.get_user(db, user_id)
    return ApiResponse.ok(UserResponse.model_validate(user))


@router.get("/{user_id}/prompts", response_model=ApiResponse[list[PromptResponse]])
def get_user_prompts(
    user_id: str,
    db: Session = Depends(get_db),
):
    """Every prompt the user authored, public or private."""
    prompts = prompt_service.get_user_prompts(db, user_id)
    return ApiResponse.ok([PromptResponse.model_validate(p) for p in prompts])


@router.get("/{user_id}/purchases", response_model=ApiResponse[list[int]])
def get_user_purchases(
    user_id: str,
    db: Session = Depends(get_db),
):
    return ApiResponse.ok(purchase_service.get_user_purchases(db, user_id))


@router.get("/{user_id}/likes", response_model=ApiResponse[list[int]])
def get_user_likes(
    user_id: str,
    db: Session = Depends(get_db),
):
    return ApiResponse.ok(engagement_service.get_user_likes(db, user_id))


@router.get("/{user_id}/ratings", response_model=ApiResponse[dict[int, int]])
def get_user_ratings(
    user_id: str,
    db: Session = Depends(get_db),
):
    return ApiResponse.ok(engagement_service.get_user_ratings(db, user_id))


@router.get("/{user_id}/history", response_model=ApiResponse[list[PurchaseResponse]])
def get_purchase_history(
    user_id: str,
    db: Session = Depends(get_db),
):
    """Purchase log entries where the user bought or sold."""
    history = purchase_service.get_purchase_history(db, user_id)
    return ApiResponse.ok([PurchaseResponse.model_validate(p) for p in history])
