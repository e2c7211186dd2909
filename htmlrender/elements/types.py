"""Common type aliases for document elements."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .div import Div  # noqa: F401
    from .heading import Heading  # noqa: F401
    from .html_list import HTMLList  # noqa: F401
    from .list_item import ListItem  # noqa: F401
    from .paragraph import Paragraph  # noqa: F401
    from .text import Text  # noqa: F401


Element = Union[
    "Text", "Paragraph", "Heading", "Div", "HTMLList", "ListItem"
]
TextElement = Union["Text", "Paragraph", "Heading"]
TaggedTextElement = Union["Paragraph", "Heading"]
ContainerElement = Union["Div", "HTMLList", "ListItem"]

ElementList = tuple["Element", ...]
ListItemList = tuple["ListItem", ...]

# Tag names used by the fixed-tag variants.
PARAGRAPH_TAG = "p"
HEADING_TAG_PREFIX = "h"
DIV_TAG = "div"
ORDERED_LIST_TAG = "ol"
UNORDERED_LIST_TAG = "ul"
LIST_ITEM_TAG = "li"

HEADING_LEVELS = (1, 6)
