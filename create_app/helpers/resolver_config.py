"""Explicit configuration for template resolution.

Environment variables are read once, here, and the resulting
``ResolverConfig`` is passed into the resolution functions.

Environment overrides:
    CREATE_APP_REGISTRY  Path to the community template registry
    CREATE_APP_TMPDIR    Base directory for temporary template clones
    CREATE_APP_GIT       git executable to use for clones
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_TEMP_PREFIX = "create-app-template-source-"
DEFAULT_MARKER_FILE = "package.json"

# Built-in template key -> directory under create_app/templates
BUILTIN_TEMPLATE_DIRS: dict[str, str] = {
    "basic": "basic",
    "react-router": "react-router",
}


def get_package_root() -> Path:
    """Return the directory of the installed ``create_app`` package."""
    import create_app

    return Path(create_app.__file__).parent


def get_templates_root() -> Path:
    """Return the directory holding the built-in templates."""
    return get_package_root() / "templates"


def default_registry_path() -> Path:
    """Return the community registry shipped with the package."""
    return get_package_root() / "community-templates.yaml"


def default_builtin_templates() -> dict[str, Path]:
    """Map built-in template keys to their packaged directories."""
    templates_root = get_templates_root()
    return {
        key: templates_root / dir_name
        for key, dir_name in BUILTIN_TEMPLATE_DIRS.items()
    }


@dataclass(frozen=True)
class ResolverConfig:
    """Configuration for resolving template sources.

    Attributes:
        builtin_templates: Built-in template key -> template directory.
        registry_path: Community template registry document.
        temp_root: Base directory for temporary clones (None = OS default).
        temp_prefix: Name prefix of temporary clone directories.
        git_command: git executable.
        marker_file: File that must exist at a template root.
    """

    builtin_templates: dict[str, Path] = field(
        default_factory=default_builtin_templates,
    )
    registry_path: Path = field(default_factory=default_registry_path)
    temp_root: Path | None = None
    temp_prefix: str = DEFAULT_TEMP_PREFIX
    git_command: str = "git"
    marker_file: str = DEFAULT_MARKER_FILE

    @property
    def builtin_keys(self) -> list[str]:
        """Built-in template keys in declaration order."""
        return list(self.builtin_templates)


def load_resolver_config(
    registry_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ResolverConfig:
    """Build a ResolverConfig from explicit arguments and the environment.

    Args:
        registry_path: Registry document; overrides CREATE_APP_REGISTRY.
        environ: Environment mapping (defaults to ``os.environ``).

    Returns:
        Resolver configuration.
    """
    env = os.environ if environ is None else environ

    if registry_path is None:
        env_registry = env.get("CREATE_APP_REGISTRY", "").strip()
        registry_path = (
            Path(env_registry) if env_registry else default_registry_path()
        )

    env_tmpdir = env.get("CREATE_APP_TMPDIR", "").strip()
    git_command = env.get("CREATE_APP_GIT", "").strip() or "git"

    return ResolverConfig(
        registry_path=registry_path,
        temp_root=Path(env_tmpdir) if env_tmpdir else None,
        git_command=git_command,
    )


def detect_package_manager(user_agent: str | None) -> str:
    """Pick a package manager from an npm-style user agent string.

    Example:
        >>> detect_package_manager("yarn/1.22.22 npm/? node/v20.11.0")
        'yarn'
    """
    agent = user_agent or ""
    if agent.startswith("yarn"):
        return "yarn"
    if agent.startswith("npm"):
        return "npm"
    return "pnpm"
