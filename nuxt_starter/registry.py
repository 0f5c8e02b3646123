"""Async client for the npm registry.

Wraps ``GET /<package>/latest`` with timeout handling and a soft failure
mode: any problem talking to the registry resolves to the ``"latest"``
dist-tag instead of raising, so a flaky network never aborts a scaffold.

Typical usage::

    client = RegistryClient()
    version = await client.latest_version("nuxt")
    package_json["dependencies"]["nuxt"] = to_version_range(version)
"""

from __future__ import annotations

import httpx

from nuxt_starter.utils import print_debug

LATEST = "latest"


def to_version_range(version: str) -> str:
    """Turn a resolved version into a caret range.

    The ``"latest"`` sentinel is returned unchanged so package managers
    resolve the dist-tag themselves.
    """
    if version == LATEST:
        return version
    return f"^{version}"


class RegistryClient:
    """Async client for an npm-compatible registry.

    Uses ``httpx.AsyncClient`` for non-blocking HTTP. Every lookup opens its
    own short-lived client with the configured base URL, timeout and
    ``User-Agent`` header.
    """

    def __init__(
        self,
        base_url: str = "https://registry.npmjs.org",
        timeout: float = 10.0,
        user_agent: str = "nuxt-starter-cli",
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _client(self) -> httpx.AsyncClient:
        """Return a fresh ``AsyncClient`` configured with our base URL and timeout."""
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout, connect=5.0),
            headers={"User-Agent": self.user_agent},
        )

    @staticmethod
    def _extract_version(data: object) -> str:
        """Pull ``version`` out of a manifest, falling back to ``"latest"``."""
        if isinstance(data, dict):
            version = data.get("version")
            if isinstance(version, str) and version:
                return version
        return LATEST

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def latest_version(self, package: str) -> str:
        """Return the latest published version of *package*.

        Scoped names (``@nuxt/ui``) are requested verbatim, the registry
        accepts the unescaped slash.

        Returns:
            The version string, or ``"latest"`` on any non-200 status,
            transport error, timeout or malformed body.
        """
        try:
            async with self._client() as client:
                response = await client.get(f"/{package}/latest")
                if response.status_code != 200:
                    print_debug(f"registry returned HTTP {response.status_code} for {package}")
                    return LATEST
                return self._extract_version(response.json())
        except httpx.TimeoutException:
            print_debug(f"registry lookup for {package} timed out after {self.timeout}s")
            return LATEST
        except httpx.HTTPError as exc:
            print_debug(f"registry lookup for {package} failed: {exc}")
            return LATEST
        except ValueError as exc:
            print_debug(f"registry sent invalid JSON for {package}: {exc}")
            return LATEST
