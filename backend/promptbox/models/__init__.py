"""Import all models so SQLAlchemy metadata knows about them."""
from promptbox.models.base import Base
from promptbox.models.prompt import Prompt

__all__ = ["Base", "Prompt"]
