"""Prompt model - saved prompt drafts shown in the card grid."""
from typing import Any
from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from promptbox.models.base import Base, TimestampMixin, OwnerMixin


class Prompt(Base, TimestampMixin, OwnerMixin):
    __tablename__ = "prompts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, default="")
    category: Mapped[str] = mapped_column(String(100), default="general")
    tags: Mapped[list[Any]] = mapped_column(default=list)
    rating: Mapped[int] = mapped_column(Integer, default=0)
    # Slot text keyed by slot id, each value wrapped in ``format``.
    content: Mapped[dict[str, Any]] = mapped_column(default=dict)
    format: Mapped[str] = mapped_column(String(20), default="json")
