"""Text helpers for labels and configuration values."""

import re

from query_composer.core.exceptions import ConfigurationError

_SEPARATORS = re.compile(r"[_\-\s]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def headline(value: str) -> str:
    """
    Convert an identifier into a human readable headline.

    Underscores, hyphens and camelCase boundaries become word breaks and
    every word gets an upper-case first letter.

    Example:
        ```python
        headline("published_at")  # "Published At"
        headline("isFeatured")    # "Is Featured"
        ```
    """
    spaced = _CAMEL_BOUNDARY.sub(" ", value)
    words = [word for word in _SEPARATORS.split(spaced) if word]
    return " ".join(word[0].upper() + word[1:] for word in words)


def require_text(value: str, setting: str, owner: str = "Filter") -> str:
    """Return ``value`` unchanged, or raise if it is not a non-empty string."""
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError(f"{owner} {setting} must be a non-empty string", setting=setting)
    return value
