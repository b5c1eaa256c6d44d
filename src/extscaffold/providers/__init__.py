"""Version, installer and VCS collaborator implementations."""

from extscaffold.providers.installer import INSTALL_COMMANDS, GitInitializer, SubprocessInstaller
from extscaffold.providers.versions import (
    FALLBACK_ENGINE_VERSION,
    ReleaseFeedVersionProvider,
    StaticVersionProvider,
    engine_range,
    load_bundled_dependency_versions,
)

__all__ = [
    "FALLBACK_ENGINE_VERSION",
    "INSTALL_COMMANDS",
    "GitInitializer",
    "ReleaseFeedVersionProvider",
    "StaticVersionProvider",
    "SubprocessInstaller",
    "engine_range",
    "load_bundled_dependency_versions",
]
