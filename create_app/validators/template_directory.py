"""Minimum-shape validation for template directories.

Shared by built-in template paths and freshly cloned repositories.
"""

from __future__ import annotations

from pathlib import Path

from create_app.core.errors import InvalidTemplateDirectoryError
from create_app.helpers.resolver_config import DEFAULT_MARKER_FILE


def validate_template_directory(
    template_path: Path,
    template_source: str,
    marker_file: str = DEFAULT_MARKER_FILE,
) -> None:
    """Check that a template path is a directory with a manifest at its root.

    Args:
        template_path: Directory to check.
        template_source: Source label used in error messages.
        marker_file: File that must exist at the template root.

    Raises:
        InvalidTemplateDirectoryError: If the path does not exist, is not a
            directory, or lacks the marker file.
    """
    if not template_path.exists():
        raise InvalidTemplateDirectoryError(
            f'Template path "{template_path}" from source '
            + f'"{template_source}" does not exist.',
            template_source,
            template_path,
            "missing",
        )

    if not template_path.is_dir():
        raise InvalidTemplateDirectoryError(
            f'Template path "{template_path}" from source '
            + f'"{template_source}" is not a directory.',
            template_source,
            template_path,
            "not-a-directory",
        )

    if not (template_path / marker_file).is_file():
        raise InvalidTemplateDirectoryError(
            f'Template source "{template_source}" is missing '
            + f'"{marker_file}" at "{template_path}".',
            template_source,
            template_path,
            "missing-marker",
        )
