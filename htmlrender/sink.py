"""Destinations for rendered documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

import click

logger = logging.getLogger(__name__)


class Sink(Protocol):
    """Accepts a complete rendered document."""

    def write(self, content: str) -> None: ...


class FileSink:
    """Write documents to a file, replacing previous content.

    Attributes:
        path: Destination file.
        encoding: Text encoding used for the file.
    """

    def __init__(self, path: str | Path, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    def write(self, content: str) -> None:
        """Store ``content`` at ``path``.

        Args:
            content: Complete document text.
        """

        # Create missing parent folders so nested destinations work.
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(content, encoding=self.encoding)
        logger.debug(f"Wrote {len(content)} characters to {self.path}")


class ConsoleSink:
    """Echo documents to standard output."""

    def write(self, content: str) -> None:
        # Rendered pages already end with a newline.
        click.echo(content, nl=not content.endswith("\n"))
