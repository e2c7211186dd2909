"""Ready-made example document."""

from __future__ import annotations

from .elements import Div, HTMLList, ListItem, Page
from .helpers import h1, h3, p, text


def _topic(heading: str, *points: str) -> ListItem:
    """Return a list item with a heading and an unordered list of points."""

    bullets = [ListItem.of(text(point)) for point in points]
    return ListItem.of(h3(heading), HTMLList(bullets, ordered=False))


def sample_page() -> Page:
    """Return the "My Page" Kotlin course outline.

    Returns:
        Page with a top-level heading and a division holding an ordered
        list of four topics.
    """

    return Page.of(
        "My Page",
        h1("Welcome to the Kotlin course"),
        Div.of(
            p("Kotlin is"),
            HTMLList.of(
                True,
                _topic(
                    "General-purpose programming language",
                    "Backend, Mobile, Stand-Alone, Web, ...",
                ),
                _topic(
                    "Modern, multi-paradigm",
                    "Object-oriented, functional programming (functions as "
                    "first-class citizens, …), etc .",
                    "Statically typed but automatically inferred types",
                ),
                _topic(
                    "Emphasis on conciseness / expressiveness / practicality",
                    "Goodbye Java boilerplate code (getter methods, setter "
                    "methods, final, etc.)",
                    "Common tasks should be short and easy",
                    "Mistakes should be caught as early as possible",
                    "But no cryptic operators as in Scala",
                ),
                _topic(
                    "100% interoperable with Java",
                    "You have a Java project? Make it a Java/Kotlin project "
                    "in minutes with 100% interop ",
                    "Kotlin-to-Java as well as Java-to-Kotlin calls",
                    "For example, Kotlin reuses Java’s existing standard "
                    "library (ArrayList, etc.) and extends it with extension "
                    "functions (opposed to, e.g., Scala that uses its own "
                    "list implementations)",
                ),
            ),
        ),
    )
