"""Entry of an ordered or unordered list."""

from __future__ import annotations

from typing import TYPE_CHECKING

from attrs import define, field

from .tags import close_tag, open_tag
from .types import LIST_ITEM_TAG, ElementList

if TYPE_CHECKING:
    from .types import Element


@define(slots=True, frozen=True)
class ListItem:
    """Entry of an ordered or unordered list.

    Attributes:
        children: Ordered child elements of the entry.
    """

    children: ElementList = field(factory=tuple, converter=tuple)

    @classmethod
    def of(cls, *children: Element) -> ListItem:
        """Build a list item from positional children."""

        return cls(children)

    @property
    def tag(self) -> str:
        return LIST_ITEM_TAG

    @property
    def open_tag(self) -> str:
        return open_tag(self.tag)

    @property
    def close_tag(self) -> str:
        return close_tag(self.tag)
