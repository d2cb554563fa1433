"""Tests for sidebyside.views.variants — VariantSet, producers and the selector."""

import logging

import pytest

from sidebyside.config import SiteConfig
from sidebyside.errors import ConfigurationError, UnrecognizedVariantLabel
from sidebyside.http.query import QueryParams
from sidebyside.templating.integration import create_environment
from sidebyside.views import (
    LANGUAGES,
    CodePanel,
    ContentProducer,
    Prose,
    VariantContent,
    VariantSelector,
    VariantSet,
)

ABC = VariantSet(("A", "B", "C"), default="A")


class CountingProducer:
    """Returns one Prose block naming the label and counts calls."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def produce(self, label: str) -> tuple[Prose, ...]:
        self.calls.append(label)
        return (Prose(f"<p>content for {label}</p>"),)


def _selector(producer=None, key: str = "demo") -> VariantSelector:
    return VariantSelector(ABC, producer or CountingProducer(), key=key)


class TestVariantSet:
    def test_languages(self) -> None:
        assert LANGUAGES.labels == ("C++", "C#", "Python", "TypeScript", "PHP")
        assert LANGUAGES.default == "TypeScript"

    def test_membership_and_order(self) -> None:
        assert "B" in ABC
        assert "D" not in ABC
        assert list(ABC) == ["A", "B", "C"]
        assert len(ABC) == 3

    def test_empty_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="at least one label"):
            VariantSet((), default="A")

    def test_duplicate_labels_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="unique"):
            VariantSet(("A", "A"), default="A")

    def test_default_must_be_a_member(self) -> None:
        with pytest.raises(ConfigurationError, match="'Z'"):
            VariantSet(("A", "B"), default="Z")


class TestVariantContent:
    def test_known_label(self) -> None:
        python = CodePanel("Python", "pass")
        content = VariantContent({"Python": (python,)}, fallback=(Prose("n/a"),))
        assert content.produce("Python") == (python,)

    def test_unknown_label_uses_fallback(self, caplog: pytest.LogCaptureFixture) -> None:
        fallback = (Prose("<p>Not written yet.</p>"),)
        content = VariantContent({"A": (Prose("a"),)}, fallback=fallback)
        with caplog.at_level(logging.WARNING, logger="sidebyside.views"):
            assert content.produce("C") == fallback
        assert "'C'" in caplog.text

    def test_missing(self) -> None:
        content = VariantContent({"A": (), "B": ()}, fallback=())
        assert content.missing(ABC) == ("C",)

    def test_satisfies_protocol(self) -> None:
        assert isinstance(VariantContent({}, fallback=()), ContentProducer)


class TestSelectorState:
    def test_initial_state_is_default(self) -> None:
        assert _selector().active == "A"

    def test_initial_state_for_languages(self) -> None:
        selector = VariantSelector(LANGUAGES, CountingProducer(), key="define")
        assert selector.active == "TypeScript"

    def test_select_changes_active(self) -> None:
        selector = _selector()
        selector.select("C")
        assert selector.active == "C"

    def test_select_is_idempotent(self) -> None:
        producer = CountingProducer()
        selector = _selector(producer)
        selector.select("C")
        first = selector.content
        selector.select("C")
        assert selector.active == "C"
        assert selector.content == first

    def test_unknown_label_raises_and_keeps_state(self) -> None:
        selector = _selector()
        selector.select("B")
        with pytest.raises(UnrecognizedVariantLabel) as exc_info:
            selector.select("Z")
        assert selector.active == "B"
        assert exc_info.value.label == "Z"
        assert exc_info.value.labels == ("A", "B", "C")

    def test_unrecognized_label_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            _selector().select("")

    def test_selectors_do_not_share_state(self) -> None:
        first = _selector(key="one")
        second = _selector(key="two")
        first.select("C")
        assert second.active == "A"

    @pytest.mark.parametrize("key", ["", "has space", "a/b", "x?y"])
    def test_key_must_be_a_slug(self, key: str) -> None:
        with pytest.raises(ConfigurationError, match="slug"):
            _selector(key=key)

    def test_dom_id(self) -> None:
        assert _selector(key="define").dom_id == "variants-define"


class TestSelectorContent:
    def test_content_follows_active_label(self) -> None:
        producer = CountingProducer()
        selector = _selector(producer)
        assert selector.content == (Prose("<p>content for A</p>"),)
        selector.select("C")
        assert selector.content == (Prose("<p>content for C</p>"),)

    def test_content_recomputed_on_every_access(self) -> None:
        producer = CountingProducer()
        selector = _selector(producer)
        selector.content
        selector.content
        assert producer.calls == ["A", "A"]

    def test_producer_without_case_falls_back(self) -> None:
        placeholder = (Prose("<p>placeholder</p>"),)
        producer = VariantContent(
            {"A": (Prose("<p>a</p>"),), "B": (Prose("<p>b</p>"),)},
            fallback=placeholder,
        )
        selector = _selector(producer)
        selector.select("C")
        assert selector.content == placeholder


class TestSelectorQuery:
    def test_apply_selects_label_from_query(self) -> None:
        selector = _selector(key="demo")
        selector.apply(QueryParams(b"demo=B"))
        assert selector.active == "B"

    def test_apply_ignores_other_keys(self) -> None:
        selector = _selector(key="demo")
        selector.apply(QueryParams(b"other=B"))
        assert selector.active == "A"

    def test_apply_ignores_unknown_label(self, caplog: pytest.LogCaptureFixture) -> None:
        selector = _selector(key="demo")
        with caplog.at_level(logging.WARNING, logger="sidebyside.views"):
            selector.apply(QueryParams(b"demo=Z"))
        assert selector.active == "A"
        assert [r.levelno for r in caplog.records] == [logging.WARNING]
        assert "Ignoring unknown variant 'Z'" in caplog.text

    def test_apply_decodes_escaped_labels(self) -> None:
        selector = VariantSelector(LANGUAGES, CountingProducer(), key="define")
        selector.apply(QueryParams(b"define=C%2B%2B"))
        assert selector.active == "C++"
        selector.apply(QueryParams(b"define=C%23"))
        assert selector.active == "C#"

    def test_options_in_set_order_with_active_marked(self) -> None:
        selector = _selector(key="demo")
        selector.select("B")
        options = selector.options
        assert [o.label for o in options] == ["A", "B", "C"]
        assert [o.active for o in options] == [False, True, False]

    def test_option_hrefs(self) -> None:
        selector = _selector(key="demo")
        assert [o.href for o in selector.options] == ["?demo=A", "?demo=B", "?demo=C"]
        assert [o.fragment_href for o in selector.options] == [o.href for o in selector.options]

    def test_option_hrefs_keep_other_selections(self) -> None:
        selector = _selector(key="demo")
        selector.apply(QueryParams(b"other=C&demo=B"))
        assert selector.options[2].href == "?other=C&demo=C"

    def test_option_hrefs_escape_labels(self) -> None:
        selector = VariantSelector(LANGUAGES, CountingProducer(), key="define")
        hrefs = {o.label: o.href for o in selector.options}
        assert hrefs["C++"] == "?define=C%2B%2B"
        assert hrefs["C#"] == "?define=C%23"

class TestSelectorExport:
    def test_export_links(self) -> None:
        selector = VariantSelector(LANGUAGES, CountingProducer(), key="define")
        selector.export_at("/concepts/classes")
        option = {o.label: o for o in selector.options}["C#"]
        assert option.href == "/concepts/classes/_variants/define/csharp/"
        assert option.fragment_href == "/concepts/classes/_variants/define/csharp/fragment.html"

    def test_export_ignores_query(self) -> None:
        selector = _selector(key="demo")
        selector.apply(QueryParams(b"other=C&demo=B"))
        selector.export_at("/page/")
        assert selector.options[0].href == "/page/_variants/demo/a/"

    def test_export_at_root(self) -> None:
        selector = _selector(key="demo")
        selector.export_at("/")
        assert selector.state_path("B") == "/_variants/demo/b/"

    def test_exported_render_does_not_push_urls(self) -> None:
        selector = _selector(key="demo")
        selector.export_at("/page")
        html = str(selector.render(create_environment(SiteConfig())))
        assert 'hx-get="/page/_variants/demo/c/fragment.html"' in html
        assert 'hx-push-url="false"' in html

    def test_colliding_slugs_rejected(self) -> None:
        variants = VariantSet(("C#", "csharp"), default="C#")
        selector = VariantSelector(variants, CountingProducer(), key="demo")
        with pytest.raises(ConfigurationError, match="distinct slugs"):
            selector.export_at("/page")


class TestSelectorRender:
    def setup_method(self) -> None:
        self.env = create_environment(SiteConfig())

    def test_renders_tabs_and_active_content(self) -> None:
        selector = _selector(key="demo")
        selector.select("B")
        html = str(selector.render(self.env))
        assert 'id="variants-demo"' in html
        assert html.count('role="tab"') == 3
        assert html.count('aria-selected="true"') == 1
        assert 'data-variant="B"' in html
        assert "<p>content for B</p>" in html
        assert "content for A" not in html

    def test_tabs_swap_only_the_selector(self) -> None:
        html = str(_selector(key="demo").render(self.env))
        assert 'hx-target="#variants-demo"' in html
        assert 'hx-swap="outerHTML"' in html
        assert 'hx-get="?demo=C"' in html
        assert 'hx-push-url="true"' in html

    def test_same_selection_renders_identically(self) -> None:
        selector = _selector()
        selector.select("C")
        first = str(selector.render(self.env))
        selector.select("C")
        assert str(selector.render(self.env)) == first
