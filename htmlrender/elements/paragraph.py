"""Paragraph holding a single run of text."""

from __future__ import annotations

from attrs import define

from .tags import close_tag, open_tag
from .types import PARAGRAPH_TAG


@define(slots=True, frozen=True)
class Paragraph:
    """Paragraph holding a single run of text.

    Attributes:
        text: Text content rendered between the paragraph tags.
    """

    text: str

    @property
    def tag(self) -> str:
        return PARAGRAPH_TAG

    @property
    def open_tag(self) -> str:
        return open_tag(self.tag)

    @property
    def close_tag(self) -> str:
        return close_tag(self.tag)
