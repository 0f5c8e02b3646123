"""Static option catalog: UI frameworks and optional Nuxt modules."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Option(BaseModel):
    """One selectable entry shown by a selector.

    ``category`` is informational only; the selectors never look at it.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Identifier returned to the caller (npm package name)")
    label: str = Field(..., description="Human-readable label")
    description: str = Field(default="")
    category: str | None = Field(default=None)


TAILWIND = "tailwindcss"
NUXT_UI = "@nuxt/ui"

UI_FRAMEWORKS: tuple[Option, ...] = (
    Option(id=TAILWIND, label="TailwindCSS", description="Utility-first CSS framework"),
    Option(id=NUXT_UI, label="@nuxt/ui", description="Nuxt UI library (includes Tailwind)"),
)

AVAILABLE_MODULES: tuple[Option, ...] = (
    Option(
        id="@nuxt/icon",
        label="@nuxt/icon",
        description="Icon library with 200,000+ icons",
        category="UI",
    ),
    Option(id="@nuxtjs/color-mode", label="@nuxtjs/color-mode", description="Dark mode support", category="UI"),
    Option(id="@nuxt/image", label="@nuxt/image", description="Image optimization", category="Performance"),
    Option(id="@pinia/nuxt", label="@pinia/nuxt", description="State management", category="Core"),
    Option(id="@vueuse/nuxt", label="@vueuse/nuxt", description="Vue composition utilities", category="Utilities"),
    Option(id="@nuxtjs/i18n", label="@nuxtjs/i18n", description="Internationalization", category="Core"),
    Option(
        id="@nuxt/content",
        label="@nuxt/content",
        description="The file-based CMS with support for Markdown, YAML, JSON",
        category="Content",
    ),
    Option(
        id="@nuxtjs/supabase",
        label="@nuxtjs/supabase",
        description="First class integration with Supabase",
        category="Core",
    ),
)

# Top-level nuxt.config keys some modules need before they work out of the box.
MODULE_CONFIG_BLOCKS: dict[str, str] = {
    "@nuxtjs/i18n": (
        "i18n: {\n"
        "    locales: ['en', 'fr'],\n"
        "    defaultLocale: 'en',\n"
        "    strategy: 'prefix_except_default'\n"
        "  },"
    ),
    "@nuxtjs/supabase": "supabase: {\n    redirect: false\n  },",
}

# Tailwind packages the template ships as devDependencies.
TAILWIND_DEV_PACKAGES: tuple[str, ...] = ("tailwindcss", "@tailwindcss/vite")
