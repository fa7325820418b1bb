"""Placeholder substitution for text content.

Placeholders are literal tokens built from a ``%``-style format with exactly
one slot, e.g. ``"{{ %s }}"`` turns the key ``name`` into ``"{{ name }}"``.
"""

from __future__ import annotations

from collections.abc import Mapping

from fileops.errors import InvalidPlaceholderFormatError

__all__ = ["DEFAULT_PLACEHOLDER_FORMAT", "build_token", "replace_placeholders", "validate_format"]

DEFAULT_PLACEHOLDER_FORMAT = "{{ %s }}"


def build_token(placeholder_format: str, placeholder: str) -> str:
    """Build the literal token for a placeholder key.

    Args:
        placeholder_format: Format with exactly one substitution slot.
        placeholder: Placeholder key.

    Returns:
        The token searched for in content.

    Raises:
        InvalidPlaceholderFormatError: If the format does not take exactly one value.

    Example:
        >>> build_token("{{ %s }}", "name")
        '{{ name }}'
    """
    try:
        return placeholder_format % (placeholder,)
    except (TypeError, ValueError) as e:
        raise InvalidPlaceholderFormatError(
            f"Invalid placeholder format ({placeholder_format}): {e}"
        ) from e


def validate_format(placeholder_format: str) -> str:
    """Check that a placeholder format has exactly one usable slot.

    Returns:
        The format unchanged.

    Raises:
        InvalidPlaceholderFormatError: If the format is unusable.
    """
    build_token(placeholder_format, "")
    return placeholder_format


def replace_placeholders(
    content: str,
    replacements: Mapping[str, str],
    placeholder_format: str = DEFAULT_PLACEHOLDER_FORMAT,
) -> str:
    """Replace every occurrence of each placeholder token in content.

    Replacements are applied one after another in the mapping's iteration
    order. Values are not escaped, so a value containing the token of a later
    key is substituted again by that key. A key whose token is empty is
    skipped.

    Args:
        content: Text to substitute into.
        replacements: Mapping of placeholder key to replacement value.
        placeholder_format: Format with exactly one substitution slot.

    Returns:
        The substituted text.
    """
    validate_format(placeholder_format)
    for placeholder, value in replacements.items():
        token = build_token(placeholder_format, placeholder)
        if not token:
            continue
        content = content.replace(token, str(value))
    return content
