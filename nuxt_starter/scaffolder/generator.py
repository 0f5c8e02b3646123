"""Main scaffolding orchestrator.

Takes ``Settings`` and turns an empty (or missing) directory into a ready to
run Nuxt project: copy the template, ask for the UI framework and modules,
pin versions in ``package.json``, patch ``nuxt.config.ts`` and install.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from pydantic import BaseModel, Field

from nuxt_starter.catalog import AVAILABLE_MODULES, NUXT_UI, UI_FRAMEWORKS, Option
from nuxt_starter.config import Settings
from nuxt_starter.errors import InstallError, ScaffoldError
from nuxt_starter.registry import RegistryClient
from nuxt_starter.selector import select_multiple, select_single
from nuxt_starter.utils import (
    copy_tree,
    list_visible_entries,
    load_json,
    print_debug,
    print_info,
    run_command,
    save_json,
)

from .manifest import ManifestChanges, apply_selection
from .nuxt_config import add_nuxt_ui_css, insert_modules, strip_tailwind_vite
from .package_manager import detect_package_manager, dev_command, install_command
from .templates import TemplateRenderer

MANIFEST_FILE = "package.json"
CONFIG_FILE = "nuxt.config.ts"
STYLESHEET_FILE = Path("app") / "assets" / "css" / "main.css"


class ScaffoldResult(BaseModel):
    """Outcome of a completed scaffold run."""

    project_path: Path
    ui_framework: str
    modules: list[str] = Field(default_factory=list)
    versions: dict[str, str] = Field(default_factory=dict)
    package_manager: str
    installed: bool = False
    next_steps: list[str] = Field(default_factory=list)


class ProjectScaffolder:
    """Runs the scaffold workflow for one target directory.

    Steps, in order:
    - validate and create the target directory
    - copy the bundled template into it
    - radio prompt for the UI framework, then checkbox prompt for modules
    - resolve latest versions and patch ``package.json``
    - patch ``nuxt.config.ts`` (and the stylesheet for @nuxt/ui)
    - run the package manager's install command
    """

    def __init__(
        self,
        settings: Settings,
        registry: RegistryClient | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.settings = settings
        self.registry = registry or RegistryClient(
            base_url=settings.registry_url,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
        )
        self.renderer = renderer or TemplateRenderer()
        self.package_manager = settings.package_manager or detect_package_manager()

    # -- Public API --------------------------------------------------------

    async def run(self) -> ScaffoldResult:
        """Execute every step and return a summary of what was generated."""
        project_root = await self.prepare_target()
        await self.copy_template(project_root)

        ui_framework = await self.choose_ui_framework()
        modules = await self.choose_modules()

        print_info("📦 Fetching latest versions...")
        changes = await self.patch_manifest(project_root, ui_framework, modules)
        await self.patch_config(project_root, ui_framework, changes.nuxt_modules)

        installed = False
        if self.settings.install:
            print_info(f"📦 Installing dependencies with {self.package_manager}...")
            await self.install(project_root)
            installed = True

        return ScaffoldResult(
            project_path=project_root,
            ui_framework=ui_framework,
            modules=[m.id for m in modules],
            versions=changes.versions,
            package_manager=self.package_manager,
            installed=installed,
            next_steps=self.next_steps(include_install=not installed),
        )

    async def prepare_target(self) -> Path:
        """Validate the target directory and create it if needed.

        Raises:
            ScaffoldError: If the current directory has visible entries, or a
                named target already exists.
        """
        target = self.settings.project_path
        if self.settings.in_current_dir:
            if list_visible_entries(target):
                raise ScaffoldError(
                    "Current directory is not empty, run this in an empty directory"
                )
            return target
        if target.exists():
            raise ScaffoldError(f'Directory "{self.settings.target}" already exists')
        await asyncio.to_thread(target.mkdir, parents=True, exist_ok=True)
        return target

    async def copy_template(self, project_root: Path) -> list[Path]:
        """Copy the template tree into *project_root*."""
        try:
            written = await copy_tree(self.settings.template_dir, project_root)
        except FileNotFoundError as exc:
            raise ScaffoldError(str(exc)) from exc
        print_debug(f"copied {len(written)} template files into {project_root}")
        return written

    async def choose_ui_framework(self) -> str:
        return await select_single(UI_FRAMEWORKS)

    async def choose_modules(self) -> list[Option]:
        return await select_multiple(AVAILABLE_MODULES)

    async def patch_manifest(
        self, project_root: Path, ui_framework: str, modules: list[Option]
    ) -> ManifestChanges:
        """Pin versions in ``package.json`` and write it back."""
        manifest_path = project_root / MANIFEST_FILE
        try:
            manifest = load_json(manifest_path)
        except (OSError, ValueError) as exc:
            raise ScaffoldError(f"Cannot read {manifest_path}: {exc}") from exc
        if not isinstance(manifest, dict):
            raise ScaffoldError(f"{manifest_path} must contain a JSON object")

        changes = await apply_selection(manifest, ui_framework, modules, self.registry)
        await save_json(manifest, manifest_path)
        return changes

    async def patch_config(
        self, project_root: Path, ui_framework: str, nuxt_modules: list[str]
    ) -> None:
        """Register modules in ``nuxt.config.ts``; rewire styles for @nuxt/ui."""
        if not nuxt_modules and ui_framework != NUXT_UI:
            return

        config_path = project_root / CONFIG_FILE
        source = await asyncio.to_thread(config_path.read_text, "utf-8")
        if ui_framework == NUXT_UI:
            source = strip_tailwind_vite(source)
        source = insert_modules(source, nuxt_modules, self.renderer)
        await asyncio.to_thread(config_path.write_text, source, "utf-8")

        stylesheet = project_root / STYLESHEET_FILE
        if ui_framework == NUXT_UI and stylesheet.exists():
            css = await asyncio.to_thread(stylesheet.read_text, "utf-8")
            await asyncio.to_thread(stylesheet.write_text, add_nuxt_ui_css(css), "utf-8")

    async def install(self, project_root: Path) -> None:
        """Run the install command with the user's terminal as output.

        Raises:
            InstallError: If the command cannot start or exits non-zero.
        """
        command = install_command(self.package_manager)
        try:
            returncode, _, _ = await run_command(command, cwd=project_root, capture=False)
        except OSError as exc:
            raise InstallError(command, f"could not be started: {exc}") from exc
        if returncode != 0:
            raise InstallError(command, f"failed with code {returncode}", returncode)

    def next_steps(self, include_install: bool = False) -> list[str]:
        """Commands the user runs next, ``cd`` omitted for the current directory."""
        steps = [] if self.settings.in_current_dir else [f"cd {self.settings.target}"]
        if include_install:
            steps.append(" ".join(install_command(self.package_manager)))
        steps.append(dev_command(self.package_manager))
        return steps
