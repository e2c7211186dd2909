"""Generic block container."""

from __future__ import annotations

from typing import TYPE_CHECKING

from attrs import define, field

from .tags import close_tag, open_tag
from .types import DIV_TAG, ElementList

if TYPE_CHECKING:
    from .types import Element


@define(slots=True, frozen=True)
class Div:
    """Generic block container.

    Attributes:
        children: Ordered child elements.
    """

    children: ElementList = field(factory=tuple, converter=tuple)

    @classmethod
    def of(cls, *children: Element) -> Div:
        """Build a division from positional children."""

        return cls(children)

    @property
    def tag(self) -> str:
        return DIV_TAG

    @property
    def open_tag(self) -> str:
        return open_tag(self.tag)

    @property
    def close_tag(self) -> str:
        return close_tag(self.tag)
