"""Prompts API routes - the card grid's storage behind the editor's save."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select, desc
from sqlalchemy.ext.asyncio import AsyncSession

from promptbox.database import get_db
from promptbox.models.prompt import Prompt
from promptbox.routes.auth import current_user
from promptbox.schemas.common import DeleteResponse
from promptbox.schemas.prompt import PromptDraft, PromptFilters, PromptResponse, RatingUpdate
from promptbox.services.auth_client import AuthUser
from promptbox.services.prompt_library import (
    MATCH_ALL,
    card_categories,
    card_tags,
    filter_prompts,
    truncate_description,
)

ANONYMOUS_USER = "default"

router = APIRouter(prefix="/api/prompts", tags=["prompts"])


@router.get("", response_model=list[PromptResponse])
async def list_prompts(
    search: str = Query(""),
    category: str = Query(MATCH_ALL),
    tag: str = Query(MATCH_ALL),
    db: AsyncSession = Depends(get_db),
):
    """List saved prompts, newest first, filtered like the card grid."""
    cards = await _all_cards(db)
    return filter_prompts(cards, search=search, category=category, tag=tag)


@router.get("/filters", response_model=PromptFilters)
async def list_filters(db: AsyncSession = Depends(get_db)):
    """Category and tag chips built from the saved prompts."""
    cards = await _all_cards(db)
    return {"categories": card_categories(cards), "tags": card_tags(cards)}


@router.get("/{prompt_id}", response_model=PromptResponse)
async def get_prompt(
    prompt_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a single prompt by ID."""
    prompt = await _get_or_404(db, prompt_id)
    return _to_response(prompt)


@router.post("", response_model=PromptResponse, status_code=201)
async def create_prompt(
    body: PromptDraft,
    db: AsyncSession = Depends(get_db),
    user: Optional[AuthUser] = Depends(current_user),
):
    """Store a draft produced by the editor, owned by the verified caller."""
    prompt = Prompt(
        title=body.title,
        description=body.description,
        category=body.category,
        tags=body.tags,
        rating=body.rating,
        content=body.content.to_api(),
        format=body.format.value,
        user_id=user.id if user and user.id else ANONYMOUS_USER,
    )
    db.add(prompt)
    await db.commit()
    await db.refresh(prompt)
    return _to_response(prompt)


@router.put("/{prompt_id}/rating", response_model=PromptResponse)
async def update_rating(
    prompt_id: int,
    body: RatingUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Set the star rating (0-5)."""
    prompt = await _get_or_404(db, prompt_id)
    prompt.rating = body.rating
    await db.commit()
    await db.refresh(prompt)
    return _to_response(prompt)


@router.delete("/{prompt_id}", response_model=DeleteResponse)
async def delete_prompt(
    prompt_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a prompt."""
    prompt = await _get_or_404(db, prompt_id)
    await db.delete(prompt)
    await db.commit()
    return {"deleted": True, "id": prompt_id}


async def _all_cards(db: AsyncSession) -> list[dict]:
    result = await db.execute(select(Prompt).order_by(desc(Prompt.created_at), desc(Prompt.id)))
    return [_to_response(p) for p in result.scalars().all()]


async def _get_or_404(db: AsyncSession, prompt_id: int) -> Prompt:
    result = await db.execute(select(Prompt).where(Prompt.id == prompt_id))
    prompt = result.scalar_one_or_none()
    if not prompt:
        raise HTTPException(status_code=404, detail="Prompt not found")
    return prompt


def _to_response(prompt: Prompt) -> dict:
    """Convert SQLAlchemy model to response dict."""
    return {
        "id": prompt.id,
        "title": prompt.title,
        "description": prompt.description,
        "summary": truncate_description(prompt.description or ""),
        "category": prompt.category,
        "tags": list(prompt.tags or []),
        "rating": prompt.rating,
        "content": prompt.content or {},
        "format": prompt.format,
        "created_at": prompt.created_at,
        "updated_at": prompt.updated_at,
        "user_id": prompt.user_id,
    }
