"""nuxt-starter scaffolder -- turns the bundled template into a project.

Quick usage::

    from nuxt_starter.config import Settings
    from nuxt_starter.scaffolder import ProjectScaffolder

    scaffolder = ProjectScaffolder(Settings(target="my-app"))
    result = await scaffolder.run()
"""

from nuxt_starter.scaffolder.generator import ProjectScaffolder, ScaffoldResult
from nuxt_starter.scaffolder.manifest import ManifestChanges, apply_selection
from nuxt_starter.scaffolder.templates import TemplateRenderer

__all__ = [
    "ManifestChanges",
    "ProjectScaffolder",
    "ScaffoldResult",
    "TemplateRenderer",
    "apply_selection",
]
