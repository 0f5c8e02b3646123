"""nuxt-starter -- interactive Nuxt project scaffolder.

Copies a bundled Nuxt + TailwindCSS template, asks for a UI framework and a
set of optional Nuxt modules, resolves their latest versions from the npm
registry, patches ``package.json`` / ``nuxt.config.ts`` and finally installs
dependencies with the detected package manager.
"""

__version__ = "0.1.0"
