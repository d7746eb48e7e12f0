"""Placeholder substitution for template content."""

from __future__ import annotations

from typing import AnyStr


def substitute(content: AnyStr, placeholder: str, value: str) -> AnyStr:
    """
    Replace every occurrence of ``placeholder`` in ``content`` with ``value``.

    Occurrences are replaced left to right without overlap, and the inserted
    value is never scanned again. Content without the placeholder is returned
    unchanged. Byte content is matched against the UTF-8 encoding of
    ``placeholder`` and ``value``; all other bytes pass through untouched.

    Args:
        content: Template text or raw template bytes.
        placeholder: Literal token to replace. Must be non-empty.
        value: Replacement text.

    Returns:
        The substituted content, of the same type as ``content``.
    """
    if not placeholder:
        raise ValueError("placeholder must be a non-empty string.")
    if isinstance(content, bytes):
        return content.replace(placeholder.encode("utf-8"), value.encode("utf-8"))
    return content.replace(placeholder, value)
