"""Page — the value every view returns.

A page is data: a title, the blocks of its body and the frame it
belongs in. The request pipeline applies query selections to its
selectors and hands it to the Shell.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Literal

from sidebyside.errors import ConfigurationError
from sidebyside.http.query import QueryParams
from sidebyside.views.components import CardGrid, Renderable
from sidebyside.views.variants import VariantSelector

Layout = Literal["page", "article"]


@dataclass(frozen=True, slots=True)
class Page:
    """What a view returns.

    Args:
        title: Text for ``<title>`` and, in the article frame, the ``<h1>``.
        body: Blocks rendered in order inside the frame.
        layout: ``"page"`` for site chrome only, ``"article"`` to add the
            back link and title heading.
        description: Content of ``<meta name="description">``.
    """

    title: str
    body: tuple[Renderable, ...] = ()
    layout: Layout = "page"
    description: str = ""

    def __post_init__(self) -> None:
        if self.layout not in ("page", "article"):
            msg = f"Unknown page layout {self.layout!r}; expected 'page' or 'article'."
            raise ConfigurationError(msg)
        object.__setattr__(self, "body", tuple(self.body))
        duplicates = [key for key, n in Counter(s.key for s in self.selectors).items() if n > 1]
        if duplicates:
            msg = f"Page {self.title!r} has more than one selector keyed {duplicates[0]!r}."
            raise ConfigurationError(msg)

    @property
    def selectors(self) -> tuple[VariantSelector, ...]:
        """Variant selectors in body order."""
        return tuple(block for block in self.body if isinstance(block, VariantSelector))

    def selector(self, dom_id: str) -> VariantSelector | None:
        """The selector rendered with element id *dom_id*, if any."""
        for selector in self.selectors:
            if selector.dom_id == dom_id:
                return selector
        return None

    def apply(self, query: QueryParams) -> None:
        """Apply the navigation's selections to every selector."""
        for selector in self.selectors:
            selector.apply(query)

    @property
    def links(self) -> tuple[str, ...]:
        """Internal hrefs of every content card on the page."""
        return tuple(
            card.href
            for block in self.body
            if isinstance(block, CardGrid)
            for card in block.cards
        )
