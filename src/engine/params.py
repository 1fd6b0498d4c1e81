"""
Numeric query parameter parsing.

Raw query strings for limit, offset and count are untrusted. A value that is
missing, not a base-10 integer, or below its minimum falls back to the
nominal default and the fallback is logged; invalid input never reaches the
engine as a number.
"""

from __future__ import annotations

from typing import Final

from src.core.logging import get_logger

DEFAULT_LIMIT: Final[int] = 50
DEFAULT_OFFSET: Final[int] = 0
DEFAULT_RANDOM_COUNT: Final[int] = 1

logger = get_logger(__name__)


def parse_int_param(
    name: str,
    raw: str | None,
    default: int,
    minimum: int | None = None,
) -> int:
    """Parse an integer query parameter with an explicit fallback policy.

    Args:
        name: Parameter name, for logging.
        raw: Raw query string value, or None when absent.
        default: Value used when raw is absent or malformed.
        minimum: Smallest accepted value; smaller values fall back to default.

    Returns:
        The parsed integer or the default.

    Example:
        >>> parse_int_param("limit", "20", 50, minimum=0)
        20
        >>> parse_int_param("limit", "abc", 50, minimum=0)
        50
    """
    if raw is None or not raw.strip():
        return default

    try:
        value = int(raw.strip(), 10)
    except ValueError:
        logger.warning("malformed_query_param", param=name, raw=raw, fallback=default)
        return default

    if minimum is not None and value < minimum:
        logger.warning(
            "malformed_query_param",
            param=name,
            raw=raw,
            minimum=minimum,
            fallback=default,
        )
        return default

    return value
