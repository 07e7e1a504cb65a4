"""Tag schemas."""
from pydantic import BaseModel


class TagColorResponse(BaseModel):
    tag: str
    class_name: str
    style: dict
