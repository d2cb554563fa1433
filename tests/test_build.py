"""Tests for sidebyside.build — static export."""

from pathlib import Path

import re

import pytest

from sidebyside.build import NOT_FOUND_PATH, BuildError, build_site, output_path
from sidebyside.errors import ConfigurationError
from sidebyside.site import Site
from sidebyside.views import (
    LANGUAGES,
    CodePanel,
    Page,
    Prose,
    VariantContent,
    VariantSelector,
    VariantSet,
)


def _site() -> Site:
    site = Site()
    site.add_route("/", lambda: Page("Home", body=(Prose("<p>home</p>"),)))
    site.add_route("/concepts", lambda: Page("Concepts"))
    site.add_route(
        "/concepts/classes",
        lambda: Page(
            "Classes",
            layout="article",
            body=(
                VariantSelector(
                    LANGUAGES,
                    VariantContent(
                        {label: (CodePanel(label, f"// {label}"),) for label in LANGUAGES},
                        fallback=(),
                    ),
                    key="define",
                ),
            ),
        ),
    )
    return site


class TestOutputPath:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/", "index.html"),
            ("/concepts", "concepts/index.html"),
            ("/concepts/classes", "concepts/classes/index.html"),
            ("/concepts/", "concepts/index.html"),
        ],
    )
    def test_layout(self, path: str, expected: str) -> None:
        assert output_path(Path("out"), path) == Path("out") / expected


class TestBuildSite:
    def test_writes_every_route(self, tmp_path: Path) -> None:
        written = build_site(_site(), tmp_path)
        states = tmp_path / "concepts" / "classes" / "_variants" / "define"
        slugs = ["cpp", "csharp", "python", "typescript", "php"]
        assert written == [
            tmp_path / "index.html",
            tmp_path / "concepts" / "index.html",
            tmp_path / "concepts" / "classes" / "index.html",
            *(states / slug / name for slug in slugs for name in ("index.html", "fragment.html")),
            tmp_path / "404.html",
        ]
        assert all(path.is_file() for path in written)

    def test_pages_are_rendered_documents(self, tmp_path: Path) -> None:
        build_site(_site(), tmp_path)
        home = (tmp_path / "index.html").read_text(encoding="utf-8")
        assert home.startswith("<!DOCTYPE html>")
        assert "<p>home</p>" in home

    def test_selectors_in_initial_state(self, tmp_path: Path) -> None:
        build_site(_site(), tmp_path)
        html = (tmp_path / "concepts" / "classes" / "index.html").read_text(encoding="utf-8")
        assert 'data-variant="TypeScript"' in html
        assert "// TypeScript" in html

    def test_not_found_page(self, tmp_path: Path) -> None:
        build_site(_site(), tmp_path)
        html = (tmp_path / "404.html").read_text(encoding="utf-8")
        assert "Page not found" in html

    def test_creates_missing_directory(self, tmp_path: Path) -> None:
        out = tmp_path / "deep" / "public"
        build_site(_site(), out)
        assert (out / "index.html").is_file()

    def test_clean_removes_stale_files(self, tmp_path: Path) -> None:
        stale = tmp_path / "stale.html"
        stale.write_text("old", encoding="utf-8")
        build_site(_site(), tmp_path, clean=True)
        assert not stale.exists()
        assert (tmp_path / "index.html").is_file()

    def test_keeps_other_files_without_clean(self, tmp_path: Path) -> None:
        other = tmp_path / "robots.txt"
        other.write_text("User-agent: *", encoding="utf-8")
        build_site(_site(), tmp_path)
        assert other.exists()

    def test_failing_route_aborts(self, tmp_path: Path) -> None:
        site = Site()

        def broken():
            raise RuntimeError("nope")

        site.add_route("/broken", broken)
        with pytest.raises(BuildError, match="'/broken'.*500"):
            build_site(site, tmp_path)

    def test_logs_written_files(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("INFO", logger="sidebyside.build"):
            build_site(_site(), tmp_path)
        assert "Wrote /concepts" in caplog.text
        assert "404.html" in caplog.text

    def test_registered_fallback_path_aborts(self, tmp_path: Path) -> None:
        site = _site()
        site.add_route(NOT_FOUND_PATH, lambda: Page("Oops"))
        with pytest.raises(BuildError, match="cannot render the fallback page"):
            build_site(site, tmp_path)


def _tab(html: str, label: str) -> tuple[str, str]:
    """href and hx-get of the tab labelled *label*."""
    match = re.search(
        rf'<a role="tab"[^>]*href="([^"]+)" hx-get="([^"]+)"[^>]*>{re.escape(label)}</a>', html
    )
    assert match is not None, f"no tab for {label!r}"
    return match.group(1), match.group(2)


class TestExportedSelectors:
    def setup_method(self) -> None:
        self.site = _site()

    def _classes_page(self, out: Path) -> str:
        build_site(self.site, out)
        return (out / "concepts" / "classes" / "index.html").read_text(encoding="utf-8")

    def test_tabs_link_to_files_not_query_strings(self, tmp_path: Path) -> None:
        html = self._classes_page(tmp_path)
        assert "?define=" not in html
        assert _tab(html, "C++") == (
            "/concepts/classes/_variants/define/cpp/",
            "/concepts/classes/_variants/define/cpp/fragment.html",
        )
        assert 'hx-push-url="false"' in html
        assert 'hx-push-url="true"' not in html

    def test_fragment_target_holds_only_that_label(self, tmp_path: Path) -> None:
        html = self._classes_page(tmp_path)
        _, fragment_url = _tab(html, "Python")
        fragment = (tmp_path / fragment_url.lstrip("/")).read_text(encoding="utf-8")
        assert fragment.startswith('<div class="variant-selector" id="variants-define">')
        assert 'data-variant="Python"' in fragment
        assert "// Python" in fragment
        assert "// TypeScript" not in fragment
        assert "<html" not in fragment
        assert "<!DOCTYPE" not in fragment

    def test_plain_link_target_is_a_page_with_that_label(self, tmp_path: Path) -> None:
        html = self._classes_page(tmp_path)
        href, _ = _tab(html, "C#")
        page = output_path(tmp_path, href).read_text(encoding="utf-8")
        assert page.startswith("<!DOCTYPE html>")
        assert 'data-variant="C#"' in page
        assert "// C#" in page
        assert "// TypeScript" not in page

    def test_state_tabs_keep_working(self, tmp_path: Path) -> None:
        html = self._classes_page(tmp_path)
        _, fragment_url = _tab(html, "PHP")
        fragment = (tmp_path / fragment_url.lstrip("/")).read_text(encoding="utf-8")
        href, next_fragment = _tab(fragment, "TypeScript")
        assert output_path(tmp_path, href).is_file()
        assert (tmp_path / next_fragment.lstrip("/")).is_file()

    def test_root_page_states(self, tmp_path: Path) -> None:
        site = Site()
        site.add_route(
            "/",
            lambda: Page(
                "Home",
                body=(
                    VariantSelector(
                        LANGUAGES,
                        VariantContent({}, fallback=(Prose("<p>soon</p>"),)),
                        key="intro",
                    ),
                ),
            ),
        )
        build_site(site, tmp_path)
        assert (tmp_path / "_variants" / "intro" / "php" / "fragment.html").is_file()

    def test_labels_sharing_a_slug_rejected(self, tmp_path: Path) -> None:
        site = Site()
        variants = VariantSet(("C++", "cpp"), default="C++")
        site.add_route(
            "/",
            lambda: Page(
                "Home",
                body=(VariantSelector(variants, VariantContent({}, fallback=()), key="x"),),
            ),
        )
        with pytest.raises(ConfigurationError, match="distinct slugs"):
            build_site(site, tmp_path)
