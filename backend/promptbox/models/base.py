"""SQLAlchemy declarative base and shared mixins."""
from datetime import datetime
from typing import Any
from sqlalchemy import JSON, String, DateTime, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models. ``list``/``dict`` columns map to JSON."""
    type_annotation_map = {
        list[Any]: JSON,
        dict[str, Any]: JSON,
    }


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


class OwnerMixin:
    """Owning user's id; 'default' for drafts saved without a login."""
    user_id: Mapped[str] = mapped_column(String(100), default="default")
