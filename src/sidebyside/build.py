"""Static export — freeze every route to an HTML file.

Each route is rendered in its initial state (every selector on its
default label) and written as ``index.html`` under a directory named
after the path, so any static file server maps ``/concepts`` to
``concepts/index.html``. The fallback page is written as ``404.html``.

A file host ignores the query string, so selector state cannot travel
the way it does on the live site. For every selector and label the
export also writes, under ``<page>/_variants/<key>/<slug>/``:

- ``index.html``: the whole page with that label active, which a plain
  tab click navigates to;
- ``fragment.html``: the selector alone, which htmx swaps in place.
"""

import logging
import shutil
from pathlib import Path

from sidebyside._internal.invoke import call_view
from sidebyside.errors import SiteError
from sidebyside.http.request import Request
from sidebyside.site import Site
from sidebyside.views.components import render_all
from sidebyside.views.page import Page

logger = logging.getLogger("sidebyside.build")

NOT_FOUND_PATH = "/__not_found__"


class BuildError(SiteError):
    """A route could not be frozen."""


def output_path(out_dir: Path, path: str) -> Path:
    """File a route is written to.

    Examples::

        "/"                 -> out/index.html
        "/concepts"         -> out/concepts/index.html
        "/concepts/classes" -> out/concepts/classes/index.html
    """
    relative = path.strip("/")
    if not relative:
        return out_dir / "index.html"
    return out_dir.joinpath(*relative.split("/"), "index.html")


def _write(target: Path, text: str) -> Path:
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding="utf-8")
    return target


def _export_variants(site: Site, page: Page, path: str, out: Path) -> list[Path]:
    """Write one page and one fragment per selector label."""
    written: list[Path] = []
    for selector in page.selectors:
        for label in selector.variants.labels:
            selector.select(label)
            state_page = output_path(out, selector.state_path(label))
            document = site.shell.compose(page, render_all(site.env, page.body), path=path)
            written.append(_write(state_page, document))
            fragment = str(selector.render(site.env))
            written.append(_write(state_page.with_name("fragment.html"), fragment))
        selector.select(selector.variants.default)
    return written


def build_site(site: Site, out_dir: str | Path, *, clean: bool = False) -> list[Path]:
    """Render every route of *site* into *out_dir*.

    Returns the written files in route order (each page followed by its
    selector states), ``404.html`` last. Raises ``BuildError`` naming the
    first route that does not render with status 200.
    """
    out = Path(out_dir)
    if clean and out.exists():
        shutil.rmtree(out)
    out.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for binding in site.registry:
        request = Request.navigate(binding.path)
        response = site.render(request)
        if response.status != 200:
            msg = f"Route {binding.path!r} rendered with status {response.status}."
            raise BuildError(msg)

        page = call_view(binding.view, request)
        for selector in page.selectors:
            selector.export_at(binding.path)
        document = site.shell.compose(page, render_all(site.env, page.body), path=binding.path)
        target = _write(output_path(out, binding.path), document)
        logger.info("Wrote %s -> %s", binding.path, target)
        written.append(target)

        states = _export_variants(site, page, binding.path, out)
        if states:
            logger.info("Wrote %d selector states for %s", len(states) // 2, binding.path)
        written.extend(states)

    response = site.render(Request.navigate(NOT_FOUND_PATH))
    if response.status != 404:
        msg = f"{NOT_FOUND_PATH!r} is a registered route; cannot render the fallback page."
        raise BuildError(msg)
    target = _write(out / "404.html", response.text)
    logger.info("Wrote fallback page -> %s", target)
    written.append(target)

    return written
