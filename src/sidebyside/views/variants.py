"""Variant selection — the one stateful component.

A ``VariantSelector`` shows one tab per label of a closed ``VariantSet``
and the output of a ``ContentProducer`` for the active label. Each
selector owns its state; several selectors on a page never share it.

Selection arrives with the navigation: ``?<key>=<label>`` in the query
string. Tab links carry the whole current selection of the page, so
following a tab changes one selector and leaves the others where they
were. In a static export (``export_at``) the tabs point at pre-rendered
files instead, since a file host ignores the query string::

    selector = VariantSelector(LANGUAGES, producer, key="define")
    selector.active            # "TypeScript"
    selector.select("Python")
    selector.content           # producer.produce("Python")
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from kida import Environment
from kida.template import Markup

from sidebyside.errors import ConfigurationError, UnrecognizedVariantLabel
from sidebyside.http.query import QueryParams
from sidebyside.templating.filters import language_slug
from sidebyside.templating.integration import render_markup
from sidebyside.views.components import Renderable, render_all

logger = logging.getLogger("sidebyside.views")


@dataclass(frozen=True, slots=True)
class VariantSet:
    """Closed, ordered set of labels with a designated default.

    Order is tab order. Labels are unique and fixed for the lifetime of
    the set.
    """

    labels: tuple[str, ...]
    default: str

    def __post_init__(self) -> None:
        if not self.labels:
            msg = "A VariantSet needs at least one label."
            raise ConfigurationError(msg)
        if len(set(self.labels)) != len(self.labels):
            msg = f"VariantSet labels must be unique, got {self.labels!r}."
            raise ConfigurationError(msg)
        if self.default not in self.labels:
            msg = f"Default label {self.default!r} is not one of {self.labels!r}."
            raise ConfigurationError(msg)

    def __contains__(self, label: object) -> bool:
        return label in self.labels

    def __iter__(self):
        return iter(self.labels)

    def __len__(self) -> int:
        return len(self.labels)


# The five languages every concept page is shown in.
LANGUAGES = VariantSet(("C++", "C#", "Python", "TypeScript", "PHP"), default="TypeScript")


@runtime_checkable
class ContentProducer(Protocol):
    """Maps the active label to the blocks shown under the tabs.

    Must return something for every label, falling back to a placeholder
    for labels it does not know.
    """

    def produce(self, label: str) -> Sequence[Renderable]: ...


@dataclass(frozen=True, slots=True)
class VariantContent:
    """Label-keyed content with a required fallback.

    Usage::

        VariantContent(
            {
                "Python": (CodePanel("Python", "class Board: ..."),),
                "PHP": (CodePanel("PHP", "class Board {}"),),
            },
            fallback=(Prose("<p>Not available in this language.</p>"),),
        )
    """

    cases: Mapping[str, Sequence[Renderable]]
    fallback: Sequence[Renderable]

    def produce(self, label: str) -> tuple[Renderable, ...]:
        blocks = self.cases.get(label)
        if blocks is None:
            logger.warning(
                "No content for variant %r (have %s); using fallback",
                label,
                ", ".join(repr(k) for k in self.cases),
            )
            return tuple(self.fallback)
        return tuple(blocks)

    def missing(self, variants: VariantSet) -> tuple[str, ...]:
        """Labels of *variants* that would fall through to the fallback."""
        return tuple(label for label in variants.labels if label not in self.cases)


@dataclass(frozen=True, slots=True)
class VariantOption:
    """One selectable tab.

    ``href`` is the navigation a plain click follows; ``fragment_href`` is
    what htmx fetches to swap just the selector.
    """

    label: str
    href: str
    fragment_href: str
    active: bool


@dataclass(slots=True)
class VariantSelector:
    """Tabs over a VariantSet plus the producer's output for the active tab.

    ``active`` starts at the set's default and only changes through
    ``select()`` (or ``apply()``, which calls it with a label taken from
    the request query).
    """

    variants: VariantSet
    producer: ContentProducer
    key: str
    active: str = field(init=False)
    _query: QueryParams = field(init=False, repr=False, default_factory=QueryParams)
    _export_path: str | None = field(init=False, repr=False, default=None)

    def __post_init__(self) -> None:
        if not self.key or not self.key.replace("-", "").replace("_", "").isalnum():
            msg = f"Selector key {self.key!r} must be a non-empty slug (letters, digits, - and _)."
            raise ConfigurationError(msg)
        self.active = self.variants.default

    @property
    def dom_id(self) -> str:
        """Element id of the rendered selector (the htmx swap target)."""
        return f"variants-{self.key}"

    def select(self, label: str) -> None:
        """Make *label* the active variant.

        Selecting the active label again changes nothing. A label outside
        the VariantSet raises ``UnrecognizedVariantLabel`` and leaves the
        state untouched.
        """
        if label not in self.variants:
            raise UnrecognizedVariantLabel(label, self.variants.labels)
        self.active = label

    def apply(self, query: QueryParams) -> None:
        """Take this selector's label from *query*, if present and valid.

        The query is also remembered so tab links keep the selections of
        the other selectors on the page.
        """
        self._query = query
        label = query.get(self.key)
        if label is None:
            return
        if label not in self.variants:
            logger.warning("Ignoring unknown variant %r for selector %r", label, self.key)
            return
        self.select(label)

    def export_at(self, page_path: str) -> None:
        """Link tabs to static files under *page_path* instead of the query.

        Label slugs name the files, so two labels sharing a slug cannot be
        exported.
        """
        slugs = [language_slug(label) for label in self.variants.labels]
        if len(set(slugs)) != len(slugs):
            msg = (
                f"Selector {self.key!r} cannot be exported: labels "
                f"{self.variants.labels!r} do not have distinct slugs."
            )
            raise ConfigurationError(msg)
        self._export_path = page_path.rstrip("/")

    def state_path(self, label: str) -> str:
        """URL path of the exported page showing *label* in this selector."""
        return f"{self._export_path or ''}/_variants/{self.key}/{language_slug(label)}/"

    def _option(self, label: str) -> VariantOption:
        if self._export_path is None:
            href = "?" + self._query.replace(**{self.key: label})
            fragment_href = href
        else:
            href = self.state_path(label)
            fragment_href = href + "fragment.html"
        return VariantOption(label, href, fragment_href, active=label == self.active)

    @property
    def options(self) -> tuple[VariantOption, ...]:
        """One option per label, in set order, the active one marked."""
        return tuple(self._option(label) for label in self.variants.labels)

    @property
    def content(self) -> tuple[Renderable, ...]:
        """Producer output for the active label, computed fresh each time."""
        return tuple(self.producer.produce(self.active))

    def render(self, env: Environment) -> Markup:
        return render_markup(
            env,
            "components/variant_selector.html",
            dom_id=self.dom_id,
            active=self.active,
            options=self.options,
            # Exported fragment URLs are not pages; only live query URLs go in history.
            push_url=self._export_path is None,
            content=render_all(env, self.content),
        )
