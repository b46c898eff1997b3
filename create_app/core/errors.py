"""Error taxonomy for template source resolution.

Every error raised by the resolution subsystem derives from
``TemplateSourceError`` and carries a ``kind`` tag plus structured fields,
so callers can branch on the variant instead of matching message text.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from create_app.helpers.helpers_logging import print_error


class TemplateSourceError(Exception):
    """Base error for template source resolution."""

    kind = "template-source"

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.source = source

    def print_error(self) -> None:
        """Print the error message using the logging helper."""
        print_error(self.message)


class InvalidSpecifierError(TemplateSourceError):
    """Malformed template specifier, detected before any I/O."""

    kind = "invalid-specifier"


class UnsupportedHostError(TemplateSourceError):
    """Well-formed URL pointing at a host other than GitHub."""

    kind = "unsupported-host"

    def __init__(
        self,
        source: str,
        host: str,
        allowed_hosts: Sequence[str],
    ) -> None:
        super().__init__(
            f'Unsupported template host "{host}" in "{source}". '
            + "Only github.com repositories are supported.",
            source,
        )
        self.host = host
        self.allowed_hosts = tuple(allowed_hosts)


class UnknownTemplateError(TemplateSourceError):
    """Source is neither a known template nor a Git specifier."""

    kind = "unknown-template"

    def __init__(
        self,
        source: str,
        builtin_keys: Sequence[str],
        community_sources: Sequence[str] = (),
    ) -> None:
        message = (
            f'Unknown template "{source}". '
            + f"Use one of [{', '.join(builtin_keys)}]"
        )
        if community_sources:
            message += (
                f", a community template [{', '.join(community_sources)}]"
            )
        message += ' or a GitHub template specifier like "owner/repo#ref".'
        super().__init__(message, source)
        self.builtin_keys = tuple(builtin_keys)
        self.community_sources = tuple(community_sources)


class RegistryError(TemplateSourceError):
    """Base error for community registry documents."""

    kind = "registry"

    def __init__(self, message: str, registry_path: Path) -> None:
        super().__init__(message)
        self.registry_path = registry_path


class RegistryReadError(RegistryError):
    """Registry document could not be read."""

    kind = "registry-read"


class RegistryParseError(RegistryError):
    """Registry document is not valid YAML."""

    kind = "registry-parse"


class RegistryValidationError(RegistryError):
    """Registry document violates the registry schema."""

    kind = "registry-validation"

    def __init__(
        self,
        registry_path: Path,
        field_path: str,
        problem: str,
    ) -> None:
        super().__init__(
            f'Invalid community template registry "{registry_path}": '
            + f'"{field_path}" {problem}',
            registry_path,
        )
        self.field_path = field_path


class TemporaryDirectoryError(TemplateSourceError):
    """The temporary directory for a fetch could not be created."""

    kind = "temporary-directory"

    def __init__(self, source: str, temp_root: Path | None, reason: str) -> None:
        location = f'under "{temp_root}"' if temp_root else "in the system temp dir"
        super().__init__(
            f"Could not create a temporary directory {location}. {reason}",
            source,
        )
        self.temp_root = temp_root
        self.reason = reason


class CloneFailureError(TemplateSourceError):
    """The shallow clone process failed (including a missing ref)."""

    kind = "clone-failure"

    def __init__(
        self,
        source: str,
        repo_url: str,
        ref: str | None,
        exit_code: int,
        output: str,
    ) -> None:
        target = f'{repo_url} (ref "{ref}")' if ref else repo_url
        message = f"git clone of {target} failed with exit code {exit_code}."
        if output.strip():
            message += f" {output.strip()}"
        super().__init__(message, source)
        self.repo_url = repo_url
        self.ref = ref
        self.exit_code = exit_code
        self.output = output


class InvalidTemplateDirectoryError(TemplateSourceError):
    """Resolved template path fails the minimum shape check."""

    kind = "invalid-template-directory"

    def __init__(
        self,
        message: str,
        source: str,
        template_path: Path,
        reason: str,
    ) -> None:
        super().__init__(message, source)
        self.template_path = template_path
        self.reason = reason


class TemplateResolutionError(TemplateSourceError):
    """Fetching a template failed; wraps the underlying cause."""

    kind = "template-resolution"

    def __init__(self, source: str, cause: TemplateSourceError) -> None:
        super().__init__(
            f'Failed to resolve template "{source}": {cause.message}',
            source,
        )
        self.cause = cause
