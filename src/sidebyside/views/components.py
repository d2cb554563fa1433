"""Stateless renderers.

Every component is a frozen dataclass with ``render(env) -> Markup``.
Inputs are trusted to be well formed; nothing here can fail at render
time except a missing template.
"""

import html
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from kida import Environment
from kida.template import Markup

from sidebyside.templating.integration import render_markup


@runtime_checkable
class Renderable(Protocol):
    """Anything that can turn itself into HTML."""

    def render(self, env: Environment) -> Markup: ...


def render_all(env: Environment, blocks: Sequence[Renderable]) -> Markup:
    """Render *blocks* in order and join them."""
    return Markup("\n".join(str(block.render(env)) for block in blocks))


@dataclass(frozen=True, slots=True)
class Prose:
    """Authored HTML, inserted as-is."""

    html: str

    def render(self, env: Environment) -> Markup:
        return Markup(self.html)


@dataclass(frozen=True, slots=True)
class Heading:
    """A section heading. The text is escaped."""

    text: str
    level: int = 2

    def __post_init__(self) -> None:
        if not 1 <= self.level <= 6:
            msg = f"Heading level must be between 1 and 6, got {self.level}."
            raise ValueError(msg)

    def render(self, env: Environment) -> Markup:
        return Markup(f"<h{self.level}>{html.escape(self.text)}</h{self.level}>")


@dataclass(frozen=True, slots=True)
class CodePanel:
    """A literal code block with a language label and optional filename."""

    language: str
    code: str
    filename: str | None = None

    def render(self, env: Environment) -> Markup:
        return render_markup(
            env,
            "components/code_panel.html",
            language=self.language,
            code=self.code,
            filename=self.filename,
        )


@dataclass(frozen=True, slots=True)
class ContentCard:
    """A link card on an index page. ``icon`` is trusted markup."""

    title: str
    description: str
    href: str
    icon: str = ""

    def render(self, env: Environment) -> Markup:
        return render_markup(
            env,
            "components/content_card.html",
            title=self.title,
            description=self.description,
            href=self.href,
            icon=Markup(self.icon),
        )


@dataclass(frozen=True, slots=True)
class CardGrid:
    """A titled grid of content cards."""

    cards: tuple[ContentCard, ...]
    heading: str = ""
    def render(self, env: Environment) -> Markup:
        return render_markup(
            env,
            "components/card_grid.html",
            heading=self.heading,
            cards=[card.render(env) for card in self.cards],
        )
