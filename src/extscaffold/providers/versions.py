"""Dependency and engine version providers."""

from __future__ import annotations

import json
import logging
import re
from importlib import resources

import httpx

from extscaffold.contracts.collaborators import VersionProvider
from extscaffold.contracts.exceptions import ProviderError

_LOG = logging.getLogger(__name__)

DEPENDENCY_TABLE = "dependency_versions.json"
DEFAULT_RELEASE_FEED = "https://update.code.visualstudio.com/api/releases"
FALLBACK_ENGINE_VERSION = "^1.54.0"

_RELEASE_RE = re.compile(r"^(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)(?:-(?P<suffix>[0-9A-Za-z.-]+))?$")


def load_bundled_dependency_versions() -> dict[str, str]:
    """Read the dependency version table shipped with the package."""
    try:
        raw = resources.files("extscaffold.data").joinpath(DEPENDENCY_TABLE).read_text(encoding="utf-8")
        payload = json.loads(raw)
    except (OSError, json.JSONDecodeError) as exc:
        raise ProviderError(f"unable to load {DEPENDENCY_TABLE}: {exc}") from exc

    if not isinstance(payload, dict) or not all(
        isinstance(name, str) and isinstance(version, str) for name, version in payload.items()
    ):
        raise ProviderError(f"{DEPENDENCY_TABLE} must map dependency names to version strings")
    return dict(payload)


def engine_range(release: str) -> str:
    """Turn a release such as ``1.55.2`` into the ``^1.55.0`` engine range.

    A pre-release suffix (``1.56.0-insider``) is kept on the range.
    """
    match = _RELEASE_RE.match(release.strip())
    if match is None:
        raise ProviderError(f"unexpected release version: {release!r}")
    version = f"^{match['major']}.{match['minor']}.0"
    if match["suffix"]:
        version = f"{version}-{match['suffix']}"
    return version


class ReleaseFeedVersionProvider(VersionProvider):
    """Bundled dependency table plus the latest release from the update feed."""

    def __init__(
        self,
        *,
        channel: str = "insider",
        feed_url: str = DEFAULT_RELEASE_FEED,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._channel = channel
        self._feed_url = feed_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._engine_version: str | None = None

    async def dependency_versions(self) -> dict[str, str]:
        return load_bundled_dependency_versions()

    async def latest_engine_version(self) -> str:
        if self._engine_version is None:
            self._engine_version = engine_range(await self._fetch_latest_release())
        return self._engine_version

    async def _fetch_latest_release(self) -> str:
        url = f"{self._feed_url}/{self._channel}"
        _LOG.debug("Fetching latest %s release from %s", self._channel, url)
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                transport=self._transport,
                headers={"X-API-Version": "2"},
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise ProviderError(
                f"Unable to evaluate the latest engine version: status code {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise ProviderError(f"Unable to evaluate the latest engine version: {exc}") from exc
        except ValueError as exc:
            raise ProviderError(f"Release feed returned invalid JSON: {url}") from exc

        if not isinstance(payload, list) or not payload:
            raise ProviderError("Release feed returned no releases")
        latest = payload[0]
        version = latest.get("version") if isinstance(latest, dict) else None
        if not isinstance(version, str):
            raise ProviderError("Release feed entry has no version")
        return version


class StaticVersionProvider(VersionProvider):
    """Fixed version data; used offline and in tests."""

    def __init__(
        self,
        dependency_versions: dict[str, str] | None = None,
        engine_version: str = FALLBACK_ENGINE_VERSION,
    ) -> None:
        self._dependency_versions = dependency_versions
        self._engine_version = engine_version

    async def dependency_versions(self) -> dict[str, str]:
        if self._dependency_versions is None:
            return load_bundled_dependency_versions()
        return dict(self._dependency_versions)

    async def latest_engine_version(self) -> str:
        return self._engine_version
