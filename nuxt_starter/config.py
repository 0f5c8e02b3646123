"""nuxt-starter configuration.

Typed settings for a single scaffold run. All settings use Pydantic v2 models
so they are validated at construction time and can be built either from
environment variables or from parsed CLI arguments.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

PackageManagerName = Literal["npm", "pnpm", "yarn", "bun"]

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "template"
DEFAULT_TARGET = "my-nuxt-app"

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Global settings for one scaffold run.

    Instances are created once by the CLI entry point and passed to the
    ``ProjectScaffolder`` and the ``RegistryClient``.
    """

    target: str = Field(default=DEFAULT_TARGET, description="Project directory, or '.' for cwd")
    template_dir: Path = Field(default=DEFAULT_TEMPLATE_DIR)
    registry_url: str = Field(default="https://registry.npmjs.org")
    user_agent: str = Field(default="nuxt-starter-cli")
    timeout: float = Field(default=10.0, ge=1, description="Per-request registry timeout in seconds")
    package_manager: PackageManagerName | None = Field(
        default=None, description="Override for the detected package manager"
    )
    install: bool = Field(default=True, description="Run the install command after patching")
    verbose: bool = Field(default=False)

    @field_validator("registry_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def in_current_dir(self) -> bool:
        """``True`` when scaffolding straight into the working directory."""
        return self.target in (".", "./")

    @property
    def project_path(self) -> Path:
        """Directory that receives the generated project."""
        if self.in_current_dir:
            return Path.cwd()
        return Path(self.target)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, **overrides: Any) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            NUXT_STARTER_REGISTRY_URL, NUXT_STARTER_TIMEOUT,
            NUXT_STARTER_TEMPLATE_DIR, NUXT_STARTER_PACKAGE_MANAGER,
            NUXT_STARTER_SKIP_INSTALL.

        Keyword arguments whose value is not ``None`` take precedence over
        the environment.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("NUXT_STARTER_REGISTRY_URL"):
            kwargs["registry_url"] = os.environ["NUXT_STARTER_REGISTRY_URL"]
        if os.environ.get("NUXT_STARTER_TIMEOUT"):
            kwargs["timeout"] = float(os.environ["NUXT_STARTER_TIMEOUT"])
        if os.environ.get("NUXT_STARTER_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["NUXT_STARTER_TEMPLATE_DIR"])
        if os.environ.get("NUXT_STARTER_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["NUXT_STARTER_PACKAGE_MANAGER"]
        if os.environ.get("NUXT_STARTER_SKIP_INSTALL", "").strip().lower() in _TRUTHY:
            kwargs["install"] = False

        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)
