"""``package.json`` patching from the user's selections."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field

from nuxt_starter.catalog import NUXT_UI, TAILWIND, TAILWIND_DEV_PACKAGES, Option
from nuxt_starter.errors import ScaffoldError
from nuxt_starter.registry import RegistryClient, to_version_range
from nuxt_starter.utils import print_info


class ManifestChanges(BaseModel):
    """What ``apply_selection`` did to the manifest."""

    nuxt_modules: list[str] = Field(
        default_factory=list,
        description="Modules to register in nuxt.config.ts, in insertion order",
    )
    versions: dict[str, str] = Field(
        default_factory=dict,
        description="Resolved registry version (or 'latest') per package",
    )


def _section(manifest: dict[str, Any], name: str) -> dict[str, str]:
    section = manifest.setdefault(name, {})
    if not isinstance(section, dict):
        kind = type(section).__name__
        raise ScaffoldError(f"package.json \"{name}\" must be an object, got {kind}")
    return section


async def apply_selection(
    manifest: dict[str, Any],
    ui_framework: str,
    modules: Sequence[Option],
    registry: RegistryClient,
) -> ManifestChanges:
    """Pin nuxt, the UI framework and every selected module in *manifest*.

    Versions are looked up one after another and echoed as they resolve.
    Choosing @nuxt/ui drops the template's standalone Tailwind
    devDependencies and registers @nuxt/ui as the first Nuxt module.

    Raises:
        ScaffoldError: If *ui_framework* is not a known framework, or a
            dependency section of *manifest* is not an object.
    """
    if ui_framework not in (TAILWIND, NUXT_UI):
        raise ScaffoldError(f"Unknown UI framework: {ui_framework}")

    dependencies = _section(manifest, "dependencies")
    dev_dependencies = _section(manifest, "devDependencies")
    changes = ManifestChanges()

    async def resolve(package: str) -> str:
        version = await registry.latest_version(package)
        changes.versions[package] = version
        print_info(f"   {package}: {version}")
        return to_version_range(version)

    dependencies["nuxt"] = await resolve("nuxt")

    if ui_framework == TAILWIND:
        for package in TAILWIND_DEV_PACKAGES:
            dev_dependencies[package] = await resolve(package)
    else:
        dependencies[NUXT_UI] = await resolve(NUXT_UI)
        changes.nuxt_modules.append(NUXT_UI)
        for package in TAILWIND_DEV_PACKAGES:
            dev_dependencies.pop(package, None)

    for module in modules:
        dependencies[module.id] = await resolve(module.id)
        changes.nuxt_modules.append(module.id)

    return changes
