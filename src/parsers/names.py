"""Normalization of user input and display names."""

from __future__ import annotations

import re

from src.errors import InvalidSelectionError

_NON_ALNUM = re.compile(r"[^0-9A-Za-z]")


def normalize_query(query: str) -> str:
    """
    Turn a free-text search query into the catalog's URL form.

    Args:
        query: Text typed by the user

    Returns:
        str: Query with spaces and hyphens replaced by underscores
    """
    return query.strip().replace(" ", "_").replace("-", "_")


def normalize_display_name(name: str) -> str:
    """
    Reduce a display name to a filesystem-safe token.

    Only ASCII letters and digits survive, so ``"One Piece: Special!"``
    becomes ``"OnePieceSpecial"``.

    Args:
        name: Display name from the search results

    Returns:
        str: Alphanumeric token used in cache file names
    """
    return _NON_ALNUM.sub("", name.replace(" ", "_"))


def parse_positive_int(raw: str | int, label: str) -> int:
    """
    Parse a numeric prompt response.

    Args:
        raw: Raw response (or an already parsed integer)
        label: What was asked for, used in the error message

    Returns:
        int: The parsed value

    Raises:
        InvalidSelectionError: If the value is not an integer or is below 1
    """
    if isinstance(raw, bool):
        raise InvalidSelectionError(f"Invalid {label}: {raw!r}")
    if isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(raw.strip())
        except ValueError as e:
            raise InvalidSelectionError(f"Invalid {label}: {raw!r}") from e
    if value < 1:
        raise InvalidSelectionError(f"Invalid {label}: {value}")
    return value
