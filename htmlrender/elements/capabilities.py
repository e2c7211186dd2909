"""Capability queries over the element variants."""

from __future__ import annotations

from typing import Any

from .div import Div
from .heading import Heading
from .html_list import HTMLList
from .list_item import ListItem
from .paragraph import Paragraph
from .text import Text

TEXT_TYPES = (Text, Paragraph, Heading)
TAGGED_TYPES = (Paragraph, Heading, Div, HTMLList, ListItem)
CONTAINER_TYPES = (Div, HTMLList, ListItem)
ELEMENT_TYPES = (Text, *TAGGED_TYPES)


def is_element(node: Any) -> bool:
    """Return whether ``node`` is one of the six element variants."""

    return isinstance(node, ELEMENT_TYPES)


def has_text(node: Any) -> bool:
    """Return whether ``node`` exposes ``text``."""

    return isinstance(node, TEXT_TYPES)


def has_tag(node: Any) -> bool:
    """Return whether ``node`` exposes ``tag``, ``open_tag`` and ``close_tag``."""

    return isinstance(node, TAGGED_TYPES)


def has_children(node: Any) -> bool:
    """Return whether ``node`` holds ordered ``children``."""

    return isinstance(node, CONTAINER_TYPES)
