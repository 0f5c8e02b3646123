"""Unit tests for Settings (nuxt_starter.config).

Tests cover:
- Defaults and validation
- Derived values (in_current_dir, project_path)
- from_env and CLI overrides
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from nuxt_starter.config import DEFAULT_TARGET, DEFAULT_TEMPLATE_DIR, Settings

pytestmark = pytest.mark.unit


class TestSettingsDefaults:
    def test_defaults(self):
        settings = Settings()
        assert settings.target == DEFAULT_TARGET == "my-nuxt-app"
        assert settings.template_dir == DEFAULT_TEMPLATE_DIR
        assert settings.registry_url == "https://registry.npmjs.org"
        assert settings.user_agent == "nuxt-starter-cli"
        assert settings.timeout == 10.0
        assert settings.package_manager is None
        assert settings.install is True
        assert settings.verbose is False

    def test_bundled_template_exists(self):
        assert (DEFAULT_TEMPLATE_DIR / "package.json").is_file()
        assert (DEFAULT_TEMPLATE_DIR / "nuxt.config.ts").is_file()

    def test_registry_trailing_slash_stripped(self):
        assert Settings(registry_url="https://npm.example.com/").registry_url == "https://npm.example.com"

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(timeout=0)

    def test_unknown_package_manager_rejected(self):
        with pytest.raises(ValidationError):
            Settings(package_manager="cargo")


class TestDerivedValues:
    @pytest.mark.parametrize("target", [".", "./"])
    def test_current_dir_targets(self, target: str, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        settings = Settings(target=target)
        assert settings.in_current_dir is True
        assert settings.project_path == tmp_path

    def test_named_target(self):
        settings = Settings(target="apps/site")
        assert settings.in_current_dir is False
        assert settings.project_path == Path("apps/site")


class TestFromEnv:
    def test_empty_environment(self, clean_env):
        assert Settings.from_env() == Settings()

    def test_reads_variables(self, clean_env, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("NUXT_STARTER_REGISTRY_URL", "https://npm.internal/")
        monkeypatch.setenv("NUXT_STARTER_TIMEOUT", "3.5")
        monkeypatch.setenv("NUXT_STARTER_TEMPLATE_DIR", str(tmp_path))
        monkeypatch.setenv("NUXT_STARTER_PACKAGE_MANAGER", "pnpm")
        monkeypatch.setenv("NUXT_STARTER_SKIP_INSTALL", "yes")
        settings = Settings.from_env()
        assert settings.registry_url == "https://npm.internal"
        assert settings.timeout == 3.5
        assert settings.template_dir == tmp_path
        assert settings.package_manager == "pnpm"
        assert settings.install is False

    def test_skip_install_falsy_value(self, clean_env, monkeypatch):
        monkeypatch.setenv("NUXT_STARTER_SKIP_INSTALL", "0")
        assert Settings.from_env().install is True

    def test_overrides_win(self, clean_env, monkeypatch):
        monkeypatch.setenv("NUXT_STARTER_PACKAGE_MANAGER", "pnpm")
        settings = Settings.from_env(package_manager="yarn", target="site")
        assert settings.package_manager == "yarn"
        assert settings.target == "site"

    def test_none_overrides_ignored(self, clean_env, monkeypatch):
        monkeypatch.setenv("NUXT_STARTER_PACKAGE_MANAGER", "bun")
        assert Settings.from_env(package_manager=None).package_manager == "bun"

    def test_invalid_timeout(self, clean_env, monkeypatch):
        monkeypatch.setenv("NUXT_STARTER_TIMEOUT", "soon")
        with pytest.raises(ValueError):
            Settings.from_env()
