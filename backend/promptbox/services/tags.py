"""Tag collection with set semantics, plus the tag color lookup."""
from typing import Iterable, Iterator

TAG_COLOR_CLASS = "tag-color-1"
TAG_COLOR_STYLE = {"backgroundColor": "#00bcff", "color": "white"}


def tag_color_class(tag: str) -> str:
    """Every tag shares one color class."""
    return TAG_COLOR_CLASS


def tag_color_style(tag: str) -> dict:
    return dict(TAG_COLOR_STYLE)


def normalize_tag(tag: str) -> str:
    return (tag or "").strip()


class TagSet:
    """Unique, non-empty tags kept in insertion order for stable display."""

    def __init__(self, tags: Iterable[str] = ()):
        self._tags: list[str] = []
        for tag in tags:
            self.add(tag)

    def add(self, tag: str) -> bool:
        """Add a tag. Blank and duplicate tags are ignored; returns True if added."""
        tag = normalize_tag(tag)
        if not tag or tag in self._tags:
            return False
        self._tags.append(tag)
        return True

    def remove(self, tag: str) -> bool:
        tag = normalize_tag(tag)
        if tag not in self._tags:
            return False
        self._tags.remove(tag)
        return True

    def to_list(self) -> list[str]:
        return list(self._tags)

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, str) and normalize_tag(tag) in self._tags

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:
        return f"TagSet({self._tags!r})"
