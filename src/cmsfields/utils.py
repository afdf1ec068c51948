"""Utility functions for cmsfields"""

import re
from collections.abc import Mapping
from enum import Enum

_UPPERCASE = re.compile(r"([A-Z])")


def titleize(name: str) -> str:
    """Turn a code-style identifier into a human readable label.

    Args:
        name: Identifier such as a field or collection name

    Returns:
        The name with its first letter uppercased, hyphens turned into spaces
        and a space inserted before every embedded uppercase letter.

    Examples:
        >>> titleize("my-fancyField")
        'My fancy Field'
        >>> titleize("posts")
        'Posts'
    """
    if not name:
        return name

    rest = _UPPERCASE.sub(r" \1", name[1:].replace("-", " "))
    return name[0].upper() + rest


def singularize(text: str) -> str:
    """Drop the trailing character, e.g. "posts" -> "post".

    Not grammatically general: "categories" becomes "categorie".
    """
    return text[:-1]


def is_sequence(value) -> bool:
    return isinstance(value, (list, tuple))


def as_field_list(fields) -> list:
    """Normalize nested fields into a new list.

    ``None`` gives an empty list, a single field mapping a one-item list and
    any other iterable (generators included) the list of its items.
    """
    if fields is None:
        return []
    if isinstance(fields, Mapping):
        return [fields]
    return list(fields)


def plain_value(value):
    """Unwrap enum members so the output holds plain strings."""
    if isinstance(value, Enum):
        return value.value
    return value


def plain_values(values):
    return [plain_value(v) for v in values]
