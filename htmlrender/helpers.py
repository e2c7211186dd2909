"""Shorthand builders for the text-bearing elements."""

from __future__ import annotations

from .elements import Heading, Paragraph, Text


def text(content: str) -> Text:
    """Wrap ``content`` in a :class:`Text` node."""

    return Text(content)


def p(content: str) -> Paragraph:
    """Wrap ``content`` in a :class:`Paragraph`."""

    return Paragraph(content)


def h(content: str, level: int) -> Heading:
    """Wrap ``content`` in a :class:`Heading` of ``level``.

    Raises:
        InvalidArgumentError: If ``level`` is not between 1 and 6.
    """

    return Heading(content, level)


def h1(content: str) -> Heading:
    return h(content, 1)


def h2(content: str) -> Heading:
    return h(content, 2)


def h3(content: str) -> Heading:
    return h(content, 3)


def h4(content: str) -> Heading:
    return h(content, 4)


def h5(content: str) -> Heading:
    return h(content, 5)


def h6(content: str) -> Heading:
    return h(content, 6)
