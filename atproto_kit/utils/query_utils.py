"""
Query parameter utilities for XRPC endpoints

Lexicons cap some parameters; the caps are applied client-side instead of
letting the server reject the request.
"""

from typing import Iterable, List, Optional, TypeVar

T = TypeVar("T")

DEFAULT_LIMIT_MIN = 1
DEFAULT_LIMIT_MAX = 100


def cap_items(items: Iterable[T], maximum: int) -> List[T]:
    """
    Keep the first `maximum` items, in order, and drop the rest.

    Args:
        items: Input collection
        maximum: Largest number of items the lexicon accepts

    Returns:
        At most `maximum` items

    Example:
        >>> cap_items(["a", "b", "c"], 2)
        ['a', 'b']
    """
    capped: List[T] = []
    if maximum <= 0:
        return capped
    for item in items:
        capped.append(item)
        if len(capped) >= maximum:
            break
    return capped


def clamp_limit(
    limit: Optional[int],
    minimum: int = DEFAULT_LIMIT_MIN,
    maximum: int = DEFAULT_LIMIT_MAX
) -> Optional[int]:
    """
    Clamp a page-size limit into [minimum, maximum].

    Args:
        limit: Requested limit, or None to let the server pick its default
        minimum: Smallest allowed value
        maximum: Largest allowed value

    Returns:
        The clamped limit, or None if no limit was requested

    Example:
        >>> clamp_limit(500)
        100
    """
    if limit is None:
        return None
    return max(minimum, min(limit, maximum))
