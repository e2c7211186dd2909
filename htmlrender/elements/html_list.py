"""Ordered or unordered list of list items."""

from __future__ import annotations

from attrs import define, field, validators

from .list_item import ListItem
from .tags import close_tag, open_tag
from .types import ORDERED_LIST_TAG, UNORDERED_LIST_TAG, ListItemList


@define(slots=True, frozen=True)
class HTMLList:
    """Ordered or unordered list of list items.

    Attributes:
        children: Ordered list items; anything else raises ``TypeError``.
        ordered: Render as ``<ol>`` when true, ``<ul>`` otherwise.
    """

    children: ListItemList = field(
        converter=tuple,
        validator=validators.deep_iterable(
            member_validator=validators.instance_of(ListItem)
        ),
    )
    ordered: bool

    @classmethod
    def of(cls, ordered: bool, *items: ListItem) -> HTMLList:
        """Build a list from the ``ordered`` flag and positional items."""

        return cls(items, ordered)

    @property
    def tag(self) -> str:
        return ORDERED_LIST_TAG if self.ordered else UNORDERED_LIST_TAG

    @property
    def open_tag(self) -> str:
        return open_tag(self.tag)

    @property
    def close_tag(self) -> str:
        return close_tag(self.tag)
