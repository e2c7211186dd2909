"""Render document elements and pages to indented HTML text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union

from .elements import Page
from .elements.capabilities import has_children, has_tag, has_text

if TYPE_CHECKING:
    from .elements.types import Element

logger = logging.getLogger(__name__)

# Spaces added for every nesting level.
INDENT_STEP = 2

# Fixed indentation of the page skeleton.
HEADER_INDENT = 2
TITLE_INDENT = 4
BODY_INDENT = 2
BODY_CONTENT_INDENT = 4


def indented(text: str, indent: int = INDENT_STEP, char: str = " ") -> str:
    """Prefix ``text`` with ``indent`` copies of ``char``.

    Args:
        text: Line to indent.
        indent: Number of fill characters to prepend.
        char: Fill character.

    Returns:
        The indented line.
    """

    return char * indent + text


def render(node: Union[Element, Page], indent: int = 0) -> str:
    """Render an element or a whole page to text.

    Tagged text elements render on a single line, bare text renders as is,
    and containers render their opening tag, one line per child indented by
    ``INDENT_STEP`` more, and their closing tag. The result for an element
    has no trailing newline. Pages are delegated to :func:`render_page`,
    which ignores ``indent``.

    Text and titles are emitted verbatim; no HTML escaping is applied.

    Args:
        node: Element or page to render.
        indent: Number of spaces before the element's first line.

    Returns:
        Rendered markup.

    Raises:
        TypeError: If ``node`` is neither an element nor a page.
    """

    if isinstance(node, Page):
        return render_page(node)

    # The text checks come first: a tagged text element is also tagged.
    if has_tag(node) and has_text(node):
        return indented(node.open_tag, indent) + node.text + node.close_tag
    if has_text(node):
        return indented(node.text, indent)
    if has_children(node):
        lines = [indented(node.open_tag, indent)]
        for child in node.children:
            lines.append(render(child, indent + INDENT_STEP))
        lines.append(indented(node.close_tag, indent))
        return "\n".join(lines)

    raise TypeError(f"Cannot render object of type {type(node).__name__}")


def render_page(page: Page) -> str:
    """Render ``page`` inside the html, header and body skeleton.

    Every line of the result, including the last, ends with a newline.

    Args:
        page: Page to render.

    Returns:
        Complete HTML document text.
    """

    logger.debug(
        f"Rendering page {page.title!r} with {len(page.children)} elements"
    )

    lines = [
        "<html>",
        indented("<header>", HEADER_INDENT),
        indented(f"<title>{page.title}</title>", TITLE_INDENT),
        indented("</header>", HEADER_INDENT),
        indented("<body>", BODY_INDENT),
    ]
    for child in page.children:
        lines.append(render(child, BODY_CONTENT_INDENT))
    lines.append(indented("</body>", BODY_INDENT))
    lines.append("</html>")

    return "".join(f"{line}\n" for line in lines)
