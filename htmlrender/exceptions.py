"""Errors raised while building or loading documents."""

from __future__ import annotations

from typing import Any


class HtmlRenderError(Exception):
    """Base class for all htmlrender errors."""


class InvalidArgumentError(HtmlRenderError, ValueError):
    """A constructor received a value outside its accepted range.

    Attributes:
        value: The rejected value.
        valid_range: Inclusive ``(low, high)`` bounds of accepted values.
    """

    def __init__(
        self, message: str, value: Any, valid_range: tuple[int, int]
    ) -> None:
        super().__init__(message)
        self.value = value
        self.valid_range = valid_range


class DefinitionError(HtmlRenderError, ValueError):
    """A page definition does not describe a valid document tree."""
