"""Delimiters derived from an element's tag name."""

from __future__ import annotations


def open_tag(tag: str) -> str:
    """Return the opening delimiter for ``tag``, e.g. ``<p>``."""

    return f"<{tag}>"


def close_tag(tag: str) -> str:
    """Return the closing delimiter for ``tag``, e.g. ``</p>``."""

    return f"</{tag}>"
