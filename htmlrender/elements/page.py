"""Titled document holding the top-level elements."""

from __future__ import annotations

from typing import TYPE_CHECKING

from attrs import define, field

from .types import ElementList

if TYPE_CHECKING:
    from .types import Element


@define(slots=True, frozen=True)
class Page:
    """Titled document holding the top-level elements.

    A page is the root of a document and cannot be nested in a container.

    Attributes:
        title: Page title, placed in the header verbatim.
        children: Ordered top-level elements of the body.
    """

    title: str
    children: ElementList = field(factory=tuple, converter=tuple)

    @classmethod
    def of(cls, title: str, *children: Element) -> Page:
        """Build a page from a title and positional children."""

        return cls(title, children)
