"""Build HTML documents from immutable elements and render them as text."""

from .elements import (
    Div,
    Heading,
    HTMLList,
    ListItem,
    Page,
    Paragraph,
    Text,
    has_children,
    has_tag,
    has_text,
    is_element,
)
from .exceptions import DefinitionError, HtmlRenderError, InvalidArgumentError
from .helpers import h, h1, h2, h3, h4, h5, h6, p, text
from .renderer import indented, render, render_page
from .sink import ConsoleSink, FileSink, Sink

__all__ = [
    "ConsoleSink",
    "DefinitionError",
    "Div",
    "FileSink",
    "HTMLList",
    "Heading",
    "HtmlRenderError",
    "InvalidArgumentError",
    "ListItem",
    "Page",
    "Paragraph",
    "Sink",
    "Text",
    "h",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "has_children",
    "has_tag",
    "has_text",
    "indented",
    "is_element",
    "p",
    "render",
    "render_page",
    "text",
]
