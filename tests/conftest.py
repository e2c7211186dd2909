"""Shared fixtures for the htmlrender tests.

The ``page_definition`` fixture describes, as plain data, the same document
that ``small_page`` builds from elements, so loader and renderer tests can
compare their results directly.
"""

from __future__ import annotations

from typing import Any, Dict

import pytest

from htmlrender import Div, HTMLList, ListItem, Page, h1, h2, p, text

JSONDict = Dict[str, Any]


@pytest.fixture
def small_page() -> Page:
    """Return a page exercising every element variant."""

    return Page.of(
        "Shopping",
        h1("Groceries"),
        Div.of(
            p("Buy these:"),
            HTMLList.of(
                False,
                ListItem.of(text("milk")),
                ListItem.of(h2("bread"), text("whole grain")),
            ),
        ),
    )


@pytest.fixture
def page_definition() -> JSONDict:
    """Return the plain data description of ``small_page``."""

    return {
        "title": "Shopping",
        "children": [
            {"h1": "Groceries"},
            {
                "div": [
                    {"p": "Buy these:"},
                    {
                        "ul": [
                            {"li": [{"text": "milk"}]},
                            {"li": [{"h2": "bread"}, {"text": "whole grain"}]},
                        ]
                    },
                ]
            },
        ],
    }


@pytest.fixture
def small_page_html() -> str:
    """Return the expected rendering of ``small_page``."""

    return (
        "<html>\n"
        "  <header>\n"
        "    <title>Shopping</title>\n"
        "  </header>\n"
        "  <body>\n"
        "    <h1>Groceries</h1>\n"
        "    <div>\n"
        "      <p>Buy these:</p>\n"
        "      <ul>\n"
        "        <li>\n"
        "          milk\n"
        "        </li>\n"
        "        <li>\n"
        "          <h2>bread</h2>\n"
        "          whole grain\n"
        "        </li>\n"
        "      </ul>\n"
        "    </div>\n"
        "  </body>\n"
        "</html>\n"
    )
