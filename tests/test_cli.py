"""Tests for sidebyside.cli — entrypoint, site resolution and subcommands."""

import sys
import types
from pathlib import Path

import pytest

from sidebyside.cli import main
from sidebyside.cli._resolve import DEFAULT_SITE, resolve_site
from sidebyside.site import Site
from sidebyside.views import Page, Prose

MODULE = "_sidebyside_cli_fixture"


@pytest.fixture
def fixture_module():
    """Register an importable module holding a few site objects."""
    module = types.ModuleType(MODULE)

    site = Site()
    site.add_route("/", lambda: Page("Home", body=(Prose("<p>hi</p>"),)), name="home")
    site.add_route("/about", lambda: Page("About"))
    module.site = site

    broken = Site()
    broken.add_route("/", lambda: "not a page")
    module.broken = broken

    module.make_site = lambda: site
    module.not_a_site = "hello"

    sys.modules[MODULE] = module
    yield module
    del sys.modules[MODULE]


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    @pytest.mark.parametrize("command", ["routes", "check", "build"])
    def test_subcommand_help_exits_zero(self, command: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([command, "--help"])
        assert exc_info.value.code == 0

    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "sidebyside" in capsys.readouterr().out

    def test_unknown_command(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["serve"])
        assert exc_info.value.code == 2


class TestResolveSite:
    def test_module_and_attribute(self, fixture_module) -> None:
        assert resolve_site(f"{MODULE}:site") is fixture_module.site

    def test_attribute_defaults_to_site(self, fixture_module) -> None:
        assert resolve_site(MODULE) is fixture_module.site

    def test_factory(self, fixture_module) -> None:
        assert resolve_site(f"{MODULE}:make_site") is fixture_module.site

    def test_not_a_site(self, fixture_module) -> None:
        with pytest.raises(TypeError, match="not a sidebyside.Site"):
            resolve_site(f"{MODULE}:not_a_site")

    def test_missing_attribute(self, fixture_module) -> None:
        with pytest.raises(AttributeError):
            resolve_site(f"{MODULE}:nope")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_site("no_such_module_anywhere:site")

    def test_default_is_the_bundled_site(self) -> None:
        assert DEFAULT_SITE == "sidebyside.content:site"
        assert isinstance(resolve_site(DEFAULT_SITE), Site)


class TestRoutesCommand:
    def test_lists_routes(self, fixture_module, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", f"{MODULE}:site"])
        out = capsys.readouterr().out
        lines = out.splitlines()
        assert lines[0].split() == ["PATH", "VIEW"]
        assert lines[2].startswith("/ ")
        assert "(home)" in lines[2]
        assert lines[3].startswith("/about ")

    def test_bad_import(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "no_such_module_anywhere:site"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_bundled_site(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes"])
        out = capsys.readouterr().out
        assert "/concepts/classes" in out
        assert "/concepts/web-research" in out


class TestCheckCommand:
    def test_clean_site(self, fixture_module, capsys: pytest.CaptureFixture[str]) -> None:
        main(["check", f"{MODULE}:site"])
        assert "2 routes checked, 0 errors" in capsys.readouterr().out

    def test_errors_exit_one(self, fixture_module, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", f"{MODULE}:broken"])
        assert exc_info.value.code == 1
        assert "error: /: TypeError" in capsys.readouterr().out


class TestBuildCommand:
    def test_writes_files(
        self,
        fixture_module,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        main(["build", f"{MODULE}:site", "--out", str(tmp_path)])
        assert (tmp_path / "index.html").is_file()
        assert (tmp_path / "about" / "index.html").is_file()
        assert (tmp_path / "404.html").is_file()
        assert "Wrote 3 files" in capsys.readouterr().out

    def test_broken_site_exits_one(
        self,
        fixture_module,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["build", f"{MODULE}:broken", "--out", str(tmp_path)])
        assert exc_info.value.code == 1
        assert "status 500" in capsys.readouterr().err
