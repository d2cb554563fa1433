"""Sidebyside — one concept, five languages, side by side.

A small kida-rendered site engine: a table of literal paths, a page
shell, stateless code panels and cards, and a variant selector that
shows the same example in C++, C#, Python, TypeScript or PHP.

Basic usage::

    from sidebyside import CodePanel, Page, Site

    site = Site()

    @site.route("/")
    def home():
        return Page("Home", body=(CodePanel("Python", "print('hi')"),))

The site itself lives in ``sidebyside.content``::

    from sidebyside.content import site
    site.get("/concepts/classes").text
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "LANGUAGES",
    "CardGrid",
    "CodePanel",
    "ConfigurationError",
    "ContentCard",
    "ContentProducer",
    "DuplicateRoute",
    "Heading",
    "HTTPError",
    "Page",
    "Prose",
    "Request",
    "Response",
    "RouteNotFound",
    "RouteRegistry",
    "Site",
    "SiteConfig",
    "SiteError",
    "UnrecognizedVariantLabel",
    "VariantContent",
    "VariantSelector",
    "VariantSet",
    "ViewBinding",
]

_VIEWS = (
    "LANGUAGES",
    "CardGrid",
    "CodePanel",
    "ContentCard",
    "ContentProducer",
    "Heading",
    "Page",
    "Prose",
    "VariantContent",
    "VariantSelector",
    "VariantSet",
)
_ERRORS = (
    "ConfigurationError",
    "DuplicateRoute",
    "HTTPError",
    "RouteNotFound",
    "SiteError",
    "UnrecognizedVariantLabel",
)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import sidebyside`` fast while providing a clean top-level API.
    """
    if name == "Site":
        from sidebyside.site import Site

        return Site

    if name == "SiteConfig":
        from sidebyside.config import SiteConfig

        return SiteConfig

    if name == "Request":
        from sidebyside.http.request import Request

        return Request

    if name == "Response":
        from sidebyside.http.response import Response

        return Response

    if name in ("RouteRegistry", "ViewBinding"):
        from sidebyside import routing as _routing

        return getattr(_routing, name)

    if name in _VIEWS:
        from sidebyside import views as _views

        return getattr(_views, name)

    if name in _ERRORS:
        from sidebyside import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
