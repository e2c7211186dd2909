"""Convert documents to and from plain data, JSON and YAML.

Each element maps to a mapping with a single key naming its kind::

    title: My Page
    children:
      - h1: Welcome
      - div:
          - p: Some text
          - ul:
              - li: [plain text]

Bare strings are read as text nodes. ``{"heading": {"text": ..., "level":
...}}`` is accepted as an alternative to the ``h1`` .. ``h6`` keys.
"""

from __future__ import annotations

try:
    import orjson  # type: ignore[import-not-found]
except ImportError:  # pragma: no cover - optional dependency
    orjson = None  # type: ignore[assignment]

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml  # type: ignore[import-untyped]

from .elements import Div, Heading, HTMLList, ListItem, Page, Paragraph, Text
from .elements.types import (
    DIV_TAG,
    HEADING_TAG_PREFIX,
    LIST_ITEM_TAG,
    ORDERED_LIST_TAG,
    PARAGRAPH_TAG,
    UNORDERED_LIST_TAG,
    Element,
)
from .exceptions import DefinitionError

logger = logging.getLogger(__name__)

JSONDict = Dict[str, Any]
NodeData = Any

TEXT_KEY = "text"
HEADING_KEY = "heading"
OUTPUT_FORMATS = ("json", "yaml")
DEFINITION_SUFFIXES = (".json", ".yaml", ".yml")


def json_dumps(data: object, pretty: bool = False) -> str:
    """Serialize data to a JSON string.

    Args:
        data: Data structure to serialize.
        pretty: Indent nested structures by two spaces.

    Returns:
        JSON representation of ``data``.
    """

    if orjson is not None:
        option = orjson.OPT_INDENT_2 if pretty else None
        return orjson.dumps(data, option=option).decode()
    return json.dumps(data, ensure_ascii=False, indent=2 if pretty else None)


def json_loads(data: str | bytes) -> object:
    """Deserialize JSON data from a string or bytes.

    Args:
        data: JSON content as ``str`` or ``bytes``.

    Returns:
        Parsed JSON object.
    """

    if orjson is not None:
        return orjson.loads(data)
    if isinstance(data, (bytes, bytearray)):
        return json.loads(data.decode())
    return json.loads(data)


def element_to_data(node: Element) -> JSONDict:
    """Return the single-key mapping describing ``node``.

    Args:
        node: Element to convert.

    Returns:
        Plain data suitable for JSON or YAML output.
    """

    if isinstance(node, Text):
        return {TEXT_KEY: node.text}
    if isinstance(node, (Paragraph, Heading)):
        return {node.tag: node.text}
    if isinstance(node, (Div, HTMLList, ListItem)):
        return {node.tag: [element_to_data(child) for child in node.children]}

    raise TypeError(f"Cannot convert object of type {type(node).__name__}")


def page_to_data(page: Page) -> JSONDict:
    """Return plain data describing ``page``."""

    return {
        "title": page.title,
        "children": [element_to_data(child) for child in page.children],
    }


def _expect_text(key: str, value: Any) -> str:
    """Return ``value`` when it is a string, raising otherwise."""

    if not isinstance(value, str):
        raise DefinitionError(
            f"Expected a string for {key!r}, got {type(value).__name__}"
        )
    return value


def _expect_list(key: str, value: Any) -> List[Any]:
    """Return ``value`` when it is a list, raising otherwise."""

    if not isinstance(value, list):
        raise DefinitionError(
            f"Expected a list of children for {key!r}, "
            f"got {type(value).__name__}"
        )
    return value


def _heading_level(key: str) -> int | None:
    """Return the level encoded in keys such as ``h2``, if any."""

    suffix = key[len(HEADING_TAG_PREFIX):]
    if (
        key.startswith(HEADING_TAG_PREFIX)
        and suffix.isascii()
        and suffix.isdecimal()
    ):
        return int(suffix)
    return None


def element_from_data(data: NodeData) -> Element:
    """Build an element from its plain data description.

    Args:
        data: A string or a single-key mapping as produced by
            :func:`element_to_data`.

    Returns:
        The described element.

    Raises:
        DefinitionError: If ``data`` does not describe an element.
        InvalidArgumentError: If a heading level is outside 1 to 6.
    """

    if isinstance(data, str):
        return Text(data)
    if not isinstance(data, dict) or len(data) != 1:
        raise DefinitionError(
            f"Expected a string or a single-key mapping, got {data!r}"
        )

    ((key, value),) = data.items()
    if not isinstance(key, str):
        raise DefinitionError(f"Element kind must be a string, got {key!r}")

    if key == TEXT_KEY:
        return Text(_expect_text(key, value))
    if key == PARAGRAPH_TAG:
        return Paragraph(_expect_text(key, value))
    if key == HEADING_KEY:
        if not isinstance(value, dict) or TEXT_KEY not in value:
            raise DefinitionError(
                f"Expected a mapping with {TEXT_KEY!r} for {key!r}"
            )
        level = value.get("level", 1)
        if not isinstance(level, int) or isinstance(level, bool):
            raise DefinitionError(
                f"Expected an integer level for {key!r}, got {level!r}"
            )
        return Heading(_expect_text(key, value[TEXT_KEY]), level)

    level = _heading_level(key)
    if level is not None:
        return Heading(_expect_text(key, value), level)

    if key in (DIV_TAG, LIST_ITEM_TAG):
        children = [element_from_data(c) for c in _expect_list(key, value)]
        return Div(children) if key == DIV_TAG else ListItem(children)

    if key in (ORDERED_LIST_TAG, UNORDERED_LIST_TAG):
        items = [element_from_data(c) for c in _expect_list(key, value)]

        # Lists hold list items only.
        for item in items:
            if not isinstance(item, ListItem):
                raise DefinitionError(
                    f"Children of {key!r} must be {LIST_ITEM_TAG!r} entries, "
                    f"got {type(item).__name__}"
                )
        return HTMLList(items, key == ORDERED_LIST_TAG)

    raise DefinitionError(f"Unknown element kind {key!r}")


def page_from_data(data: Any) -> Page:
    """Build a page from its plain data description.

    Args:
        data: Mapping with a ``title`` and an optional ``children`` list.

    Returns:
        The described page.

    Raises:
        DefinitionError: If ``data`` does not describe a page.
    """

    if not isinstance(data, dict) or "title" not in data:
        raise DefinitionError("A page definition needs a 'title' entry")

    title = _expect_text("title", data["title"])
    children = _expect_list("children", data.get("children") or [])
    return Page(title, [element_from_data(child) for child in children])


def load_page(path: Path, encoding: str = "utf-8") -> Page:
    """Read a page definition from a JSON or YAML file.

    Args:
        path: Location of a ``.json``, ``.yaml`` or ``.yml`` file.
        encoding: Text encoding of the file.

    Returns:
        The described page.

    Raises:
        DefinitionError: If the file type or its content is not supported.
    """

    if path.suffix not in DEFINITION_SUFFIXES:
        raise DefinitionError(
            f"Unsupported definition file {path.name!r}; expected one of "
            f"{', '.join(DEFINITION_SUFFIXES)}"
        )

    # Decode JSON or YAML depending on file extension. JSON and text decoding
    # errors are ``ValueError`` subclasses; unknown encodings are lookups.
    try:
        text = path.read_text(encoding=encoding)
        if path.suffix == ".json":
            data = json_loads(text)
        else:
            data = yaml.safe_load(text)
    except (yaml.YAMLError, ValueError, LookupError) as exc:
        raise DefinitionError(f"Cannot read {path.name!r}: {exc}") from exc

    page = page_from_data(data)
    logger.debug(
        f"Loaded page {page.title!r} with {len(page.children)} elements "
        f"from {path}"
    )
    return page


def dump_page(page: Page, output_format: str = "json") -> str:
    """Serialize ``page`` as JSON or YAML text.

    Args:
        page: Page to serialize.
        output_format: ``"json"`` or ``"yaml"``.

    Returns:
        The page definition text.
    """

    data = page_to_data(page)
    if output_format == "json":
        return json_dumps(data, pretty=True)
    if output_format == "yaml":
        return yaml.safe_dump(data, allow_unicode=True, sort_keys=False)

    raise ValueError(f"Unsupported output format {output_format!r}")
