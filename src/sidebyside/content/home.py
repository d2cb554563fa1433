"""Landing page and the site's 404 page."""

import html

from sidebyside.http.request import Request
from sidebyside.views import CardGrid, ContentCard, Page, Prose


def home() -> Page:
    return Page(
        title="Home",
        description="One concept, five languages, side by side.",
        body=(
            Prose(
                "<h1>Side by Side</h1>\n"
                "<p>Object-oriented ideas shown in C++, C#, Python, TypeScript and "
                "PHP at once. Pick a language on any example and compare.</p>"
            ),
            CardGrid(
                (
                    ContentCard(
                        title="OOP Concepts",
                        description="Classes, inheritance, GUIs, persistence and more",
                        href="/concepts",
                    ),
                ),
            ),
        ),
    )


def not_found(request: Request) -> Page:
    return Page(
        title="Page not found",
        body=(
            Prose(
                "<h1>Page not found</h1>\n"
                f"<p>There is no page at <code>{html.escape(request.path)}</code>.</p>\n"
                '<p><a href="/concepts">Browse the concepts</a> or '
                '<a href="/">go home</a>.</p>'
            ),
        ),
    )
