"""Tests for the command-line entry point (nuxt_starter.cli).

Covers:
- Argument parsing and defaults
- Merging CLI flags over environment settings
- main() success output and exit codes
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from nuxt_starter import __version__
from nuxt_starter.cli import build_parser, main, report, settings_from_args
from nuxt_starter.config import DEFAULT_TARGET
from nuxt_starter.errors import InstallError, ScaffoldError
from nuxt_starter.scaffolder import ScaffoldResult
from nuxt_starter.utils import console, set_verbose

pytestmark = pytest.mark.unit


def _result(installed: bool = True) -> ScaffoldResult:
    return ScaffoldResult(
        project_path=Path("my-app"),
        ui_framework="tailwindcss",
        package_manager="npm",
        installed=installed,
        next_steps=["cd my-app", "npm run dev"],
    )


@pytest.fixture(autouse=True)
def _isolated(clean_env):
    yield
    set_verbose(False)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.target == DEFAULT_TARGET
        assert args.package_manager is None
        assert args.template is None
        assert args.registry is None
        assert args.skip_install is False
        assert args.verbose is False

    def test_all_flags(self):
        args = build_parser().parse_args(
            [".", "--package-manager", "pnpm", "--template", "tpl", "--registry",
             "https://npm.example.com", "--skip-install", "-v"]
        )
        assert args.target == "."
        assert args.package_manager == "pnpm"
        assert args.template == Path("tpl")
        assert args.registry == "https://npm.example.com"
        assert args.skip_install is True
        assert args.verbose is True

    def test_unknown_package_manager_rejected(self):
        with pytest.raises(SystemExit) as excinfo:
            build_parser().parse_args(["--package-manager", "deno"])
        assert excinfo.value.code == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            build_parser().parse_args(["--version"])
        assert excinfo.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestSettingsFromArgs:
    def test_flags_override_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("NUXT_STARTER_PACKAGE_MANAGER", "yarn")
        args = build_parser().parse_args(["app", "--package-manager", "bun"])
        assert settings_from_args(args).package_manager == "bun"

    def test_environment_used_without_flags(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("NUXT_STARTER_SKIP_INSTALL", "1")
        settings = settings_from_args(build_parser().parse_args(["app"]))
        assert settings.install is False
        assert settings.target == "app"

    def test_skip_install_flag(self):
        settings = settings_from_args(build_parser().parse_args(["app", "--skip-install"]))
        assert settings.install is False

    def test_install_by_default(self):
        assert settings_from_args(build_parser().parse_args(["app"])).install is True


# ---------------------------------------------------------------------------
# report / main
# ---------------------------------------------------------------------------


class TestReport:
    def test_installed(self):
        with console.capture() as capture:
            report(_result(installed=True))
        output = capture.get()
        assert "Installation complete" in output
        assert "npm run dev" in output

    def test_skipped(self):
        with console.capture() as capture:
            report(_result(installed=False))
        assert "Skipped dependency installation" in capture.get()


class TestMain:
    def _patched_scaffolder(self, run: AsyncMock) -> MagicMock:
        scaffolder_cls = MagicMock()
        scaffolder_cls.return_value.run = run
        return scaffolder_cls

    def test_success(self):
        scaffolder_cls = self._patched_scaffolder(AsyncMock(return_value=_result()))
        with patch("nuxt_starter.cli.ProjectScaffolder", scaffolder_cls):
            with console.capture() as capture:
                main(["my-app"])
        output = capture.get()
        assert "Creating Nuxt + TailwindCSS project in my-app" in output
        assert "Next steps" in output
        settings = scaffolder_cls.call_args.args[0]
        assert settings.target == "my-app"

    def test_current_directory_wording(self):
        scaffolder_cls = self._patched_scaffolder(AsyncMock(return_value=_result()))
        with patch("nuxt_starter.cli.ProjectScaffolder", scaffolder_cls):
            with console.capture() as capture:
                main(["."])
        assert "project in the current directory" in capture.get()

    def test_target_with_brackets_printed_verbatim(self):
        scaffolder_cls = self._patched_scaffolder(AsyncMock(return_value=_result()))
        with patch("nuxt_starter.cli.ProjectScaffolder", scaffolder_cls):
            with console.capture() as capture:
                main(["app[bold]", "--skip-install"])
        assert "project in app[bold]..." in capture.get()
        assert scaffolder_cls.call_args.args[0].target == "app[bold]"

    def test_scaffold_error_exits_1(self):
        run = AsyncMock(side_effect=ScaffoldError('Directory "my-app" already exists'))
        with patch("nuxt_starter.cli.ProjectScaffolder", self._patched_scaffolder(run)):
            with console.capture() as capture:
                with pytest.raises(SystemExit) as excinfo:
                    main(["my-app"])
        assert excinfo.value.code == 1
        assert 'Directory "my-app" already exists' in capture.get()

    def test_install_error_exits_1(self):
        run = AsyncMock(side_effect=InstallError(["npm", "install"], "failed with code 1", 1))
        with patch("nuxt_starter.cli.ProjectScaffolder", self._patched_scaffolder(run)):
            with console.capture() as capture:
                with pytest.raises(SystemExit) as excinfo:
                    main(["my-app"])
        assert excinfo.value.code == 1
        assert "`npm install` failed with code 1" in capture.get()

    def test_interrupt_exit_passes_through(self):
        run = AsyncMock(side_effect=SystemExit(0))
        with patch("nuxt_starter.cli.ProjectScaffolder", self._patched_scaffolder(run)):
            with pytest.raises(SystemExit) as excinfo:
                main(["my-app"])
        assert excinfo.value.code == 0

    def test_invalid_configuration_exits_1(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("NUXT_STARTER_TIMEOUT", "soon")
        scaffolder_cls = MagicMock()
        with patch("nuxt_starter.cli.ProjectScaffolder", scaffolder_cls):
            with console.capture() as capture:
                with pytest.raises(SystemExit) as excinfo:
                    main(["my-app"])
        assert excinfo.value.code == 1
        assert "invalid configuration" in capture.get()
        scaffolder_cls.assert_not_called()

    def test_verbose_flag_enables_debug(self):
        scaffolder_cls = self._patched_scaffolder(AsyncMock(return_value=_result()))
        with patch("nuxt_starter.cli.ProjectScaffolder", scaffolder_cls):
            with patch("nuxt_starter.cli.set_verbose") as verbose:
                with console.capture():
                    main(["my-app", "--verbose"])
        verbose.assert_called_once_with(True)
