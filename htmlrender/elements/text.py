"""Bare text without a surrounding tag."""

from __future__ import annotations

from attrs import define


@define(slots=True, frozen=True)
class Text:
    """Bare text without a surrounding tag.

    Attributes:
        text: Text content, emitted verbatim.
    """

    text: str
