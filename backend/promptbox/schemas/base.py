"""Base schema classes with camelCase alias generation.

Python code stays snake_case; JSON on the wire is camelCase, matching the
field names the editor UI sends (``howToUse``, ``newFormat``).
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for request schemas and in-process drafts."""
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "protected_namespaces": (),
    }

    def to_api(self) -> dict:
        """JSON-ready dict with camelCase keys and enum values."""
        return self.model_dump(mode="json", by_alias=True)


class CamelORMModel(CamelModel):
    """Base for response schemas built from SQLAlchemy rows."""
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
        "protected_namespaces": (),
    }
