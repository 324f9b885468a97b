"""
Catalog filtering - category and free-text search
"""
from typing import Callable, Iterable, List, TypeVar

from .models import Item

T = TypeVar("T")

ALL_CATEGORIES = "All"
EMPTY_RESULT_MESSAGE = "No results found"


def filter_items(items: Iterable[T], predicate: Callable[[T], bool]) -> List[T]:
    """Keep the items accepted by predicate, in their original order"""
    return [item for item in items if predicate(item)]


def matches_category(item: Item, category: str) -> bool:
    """Exact, case-sensitive category match; "All" accepts everything"""
    return category == ALL_CATEGORIES or item.category == category


def matches_search(item: Item, search_term: str) -> bool:
    """
    Case-insensitive substring match against title, description,
    author/organizer/seller and tags

    An empty or whitespace-only term accepts everything.
    """
    if not search_term or not search_term.strip():
        return True
    needle = search_term.lower()
    return any(needle in value.lower() for value in item.searchable_fields())


def filter_catalog(
    items: Iterable[Item],
    category: str = ALL_CATEGORIES,
    search_term: str = "",
) -> List[Item]:
    """
    Visible subset of a catalog

    Args:
        items: Catalog items in display order
        category: Selected category, or "All"
        search_term: Free-text search, possibly empty

    Returns:
        Items matching both the category and the search term
    """
    return filter_items(
        items,
        lambda item: matches_category(item, category) and matches_search(item, search_term),
    )
