"""Case-insensitive substring search over a sequence of items."""

from __future__ import annotations

from typing import Callable, Iterable, List, TypeVar

T = TypeVar("T")


def normalize(text: str) -> str:
    return text.casefold()


def default_search_key(item: object) -> str:
    """Project *item* onto the string it is searched by."""

    name = getattr(item, "name", None)
    if isinstance(name, str):
        return name
    return str(item)


def filter_matching(
    items: Iterable[T],
    text: str,
    key: Callable[[T], str] = default_search_key,
) -> List[T]:
    """Return the items whose projection contains *text*, in source order.

    An empty *text* keeps every item.
    """

    needle = normalize(text)
    if not needle:
        return list(items)
    return [item for item in items if needle in normalize(key(item))]


__all__ = ["default_search_key", "filter_matching", "normalize"]
