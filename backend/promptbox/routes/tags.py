"""Tags API routes."""
from fastapi import APIRouter, Query

from promptbox.schemas.tag import TagColorResponse
from promptbox.services.tags import tag_color_class, tag_color_style

router = APIRouter(prefix="/api/tags", tags=["tags"])


@router.get("/color", response_model=TagColorResponse)
async def get_tag_color(tag: str = Query(...)):
    """Display color for a tag chip."""
    return {"tag": tag, "class_name": tag_color_class(tag), "style": tag_color_style(tag)}
