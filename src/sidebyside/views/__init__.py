"""Views — pages, components, the variant selector and the shell.

Views are plain functions returning a ``Page``. Everything they put in
a page body is a renderable: ``render(env) -> Markup``.
"""

from sidebyside.views.components import (
    CardGrid,
    CodePanel,
    ContentCard,
    Heading,
    Prose,
    Renderable,
    render_all,
)
from sidebyside.views.page import Page
from sidebyside.views.shell import NavLink, Shell
from sidebyside.views.variants import (
    LANGUAGES,
    ContentProducer,
    VariantContent,
    VariantOption,
    VariantSelector,
    VariantSet,
)

__all__ = [
    "LANGUAGES",
    "CardGrid",
    "CodePanel",
    "ContentCard",
    "ContentProducer",
    "Heading",
    "NavLink",
    "Page",
    "Prose",
    "Renderable",
    "Shell",
    "VariantContent",
    "VariantOption",
    "VariantSelector",
    "VariantSet",
    "render_all",
]
