"""Search and filtering for the prompt card grid."""
from typing import Iterable, Mapping

MATCH_ALL = "ALL"
CARD_DESCRIPTION_LIMIT = 50


def _matches_filter(selected: str | None, value: bool) -> bool:
    return not selected or selected == MATCH_ALL or bool(value)


def filter_prompts(
    cards: Iterable[Mapping],
    search: str = "",
    category: str | None = MATCH_ALL,
    tag: str | None = MATCH_ALL,
) -> list[Mapping]:
    """Cards whose title or description contains ``search`` (case-insensitive)
    and whose category and tags match the selected filters. ``ALL`` or an
    empty selection matches everything.
    """
    needle = (search or "").lower()
    result = []
    for card in cards:
        matches_search = (
            needle in card.get("title", "").lower()
            or needle in card.get("description", "").lower()
        )
        matches_category = _matches_filter(category, card.get("category") == category)
        matches_tag = _matches_filter(tag, tag in card.get("tags", []))
        if matches_search and matches_category and matches_tag:
            result.append(card)
    return result


def truncate_description(text: str, limit: int = CARD_DESCRIPTION_LIMIT) -> str:
    if len(text) > limit:
        return f"{text[:limit]}..."
    return text


def card_categories(cards: Iterable[Mapping]) -> list[str]:
    """Filter chips: ``ALL`` first, then each category once in first-seen order."""
    seen = [MATCH_ALL]
    for card in cards:
        category = card.get("category")
        if category and category not in seen:
            seen.append(category)
    return seen


def card_tags(cards: Iterable[Mapping]) -> list[str]:
    seen = [MATCH_ALL]
    for card in cards:
        for tag in card.get("tags", []):
            if tag not in seen:
                seen.append(tag)
    return seen
