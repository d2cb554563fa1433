"""View composition shell.

Site chrome (header, nav, footer) around a content region, and the
article frame (back link plus title) for concept pages. Composition is
explicit: content goes in as an argument, one HTML document comes out.
"""

from dataclasses import dataclass

from kida import Environment
from kida.template import Markup

from sidebyside.config import SiteConfig
from sidebyside.views.page import Page


@dataclass(frozen=True, slots=True)
class NavLink:
    """One entry of the header navigation."""

    label: str
    href: str
    current: str = ""  # "page" when the link points at the rendered path


@dataclass(frozen=True, slots=True)
class Shell:
    """Wraps rendered content in the site frame.

    ``article_parent`` is the single back-link target of every article;
    the site is one level deep, so it is configured once, not per page.
    """

    env: Environment
    site_name: str
    nav: tuple[NavLink, ...] = ()
    article_parent: str = "/concepts"
    article_parent_label: str = "Back to concepts"
    htmx_src: str = ""

    @classmethod
    def from_config(
        cls,
        env: Environment,
        config: SiteConfig,
        nav: tuple[NavLink, ...] = (),
    ) -> "Shell":
        htmx_src = ""
        if config.htmx:
            htmx_src = f"https://unpkg.com/htmx.org@{config.htmx_version}"
        return cls(
            env=env,
            site_name=config.site_name,
            nav=nav,
            article_parent=config.article_parent,
            article_parent_label=config.article_parent_label,
            htmx_src=htmx_src,
        )

    def page(self, title: str, content: Markup, *, description: str = "", path: str = "") -> str:
        """Site chrome around *content*."""
        return self._render("base.html", title, content, description, path)

    def article(
        self,
        title: str,
        content: Markup,
        *,
        description: str = "",
        path: str = "",
    ) -> str:
        """Article frame, then site chrome, around *content*."""
        return self._render("article.html", title, content, description, path)

    def compose(self, page: Page, content: Markup, *, path: str = "") -> str:
        """Frame *content* according to ``page.layout``."""
        if page.layout == "article":
            return self.article(page.title, content, description=page.description, path=path)
        return self.page(page.title, content, description=page.description, path=path)

    def _render(
        self,
        template_name: str,
        title: str,
        content: Markup,
        description: str,
        path: str,
    ) -> str:
        nav = tuple(
            NavLink(link.label, link.href, "page" if _is_current(link.href, path) else "")
            for link in self.nav
        )
        template = self.env.get_template(template_name)
        return template.render(
            {
                "title": title,
                "description": description,
                "content": Markup(content),
                "site_name": self.site_name,
                "nav": nav,
                "htmx_src": self.htmx_src,
                "back_href": self.article_parent,
                "back_label": self.article_parent_label,
            }
        )


def _is_current(href: str, path: str) -> bool:
    if not path:
        return False
    if href == "/":
        return path == "/"
    return path == href or path.startswith(href.rstrip("/") + "/")
