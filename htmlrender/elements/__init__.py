"""Document element variants."""

from .capabilities import has_children, has_tag, has_text, is_element
from .div import Div
from .heading import Heading
from .html_list import HTMLList
from .list_item import ListItem
from .page import Page
from .paragraph import Paragraph
from .text import Text

__all__ = [
    "Div",
    "HTMLList",
    "Heading",
    "ListItem",
    "Page",
    "Paragraph",
    "Text",
    "has_children",
    "has_tag",
    "has_text",
    "is_element",
]
