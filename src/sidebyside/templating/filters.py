"""Built-in sidebyside template filters.

Auto-registered on every site kida Environment.
"""

import html
import re
from typing import Any

from kida.template import Markup

_LANGUAGE_SLUGS = {
    "c++": "cpp",
    "c#": "csharp",
    "f#": "fsharp",
    "objective-c": "objc",
}


def attr(value: Any, name: str) -> str | Markup:
    """Output an HTML attribute when value is truthy, else empty string.

    Example:
        <a href="{{ link.href }}"{{ link.current | attr("aria-current") }}>
        → <a href="/concepts" aria-current="page">   (when current is "page")
        → <a href="/concepts">                       (when current is "")

    """
    if not value:
        return ""
    return Markup(f' {name}="{html.escape(str(value))}"')


def language_slug(label: str) -> str:
    """Turn a language label into a CSS-safe slug.

    Example:
        <code class="language-{{ "C++" | language_slug }}">  → language-cpp
        <code class="language-{{ "TypeScript" | language_slug }}">  → language-typescript

    """
    lowered = label.strip().lower()
    if lowered in _LANGUAGE_SLUGS:
        return _LANGUAGE_SLUGS[lowered]
    return re.sub(r"[^a-z0-9]+", "-", lowered).strip("-") or "text"


# All built-in filters, registered automatically on every env.
BUILTIN_FILTERS: dict[str, Any] = {
    "attr": attr,
    "language_slug": language_slug,
}
