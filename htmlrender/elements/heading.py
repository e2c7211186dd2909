"""Section heading of level one to six."""

from __future__ import annotations

from typing import Any

from attrs import Attribute, define, field

from ..exceptions import InvalidArgumentError
from .tags import close_tag, open_tag
from .types import HEADING_LEVELS, HEADING_TAG_PREFIX


@define(slots=True, frozen=True)
class Heading:
    """Section heading of level one to six.

    Attributes:
        text: Text content rendered between the heading tags.
        level: Heading level; ``1`` renders as ``<h1>``.

    Raises:
        InvalidArgumentError: If ``level`` is not an integer within
            ``HEADING_LEVELS``.
    """

    text: str
    level: int = field(default=1)

    @level.validator
    def _check_level(self, attribute: Attribute[Any], value: int) -> None:
        low, high = HEADING_LEVELS

        # ``bool`` is an ``int`` subclass; reject it explicitly.
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidArgumentError(
                f"Invalid level {value!r} for heading. "
                f"Level must be an integer between {low} and {high}!",
                value=value,
                valid_range=HEADING_LEVELS,
            )
        if not low <= value <= high:
            raise InvalidArgumentError(
                f"Invalid level {value} for heading. "
                f"Level must be between {low} and {high}!",
                value=value,
                valid_range=HEADING_LEVELS,
            )

    @property
    def tag(self) -> str:
        return f"{HEADING_TAG_PREFIX}{self.level}"

    @property
    def open_tag(self) -> str:
        return open_tag(self.tag)

    @property
    def close_tag(self) -> str:
        return close_tag(self.tag)
