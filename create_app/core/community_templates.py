"""Community template registry loading.

The registry is a YAML document listing templates maintained outside this
package:

    templates:
      - name: Analytics dashboard
        source: some-org/analytics-template#main
        description: Dashboard starter with charts
        maintainer:
          name: Jane Doe
          url: https://github.com/janedoe
        organisation:
          name: Some Org
          url: https://some.org

Validation stops at the first violation in document order and reports an
index-stamped field path (e.g. ``templates[2].source``).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

from create_app.core.errors import (
    RegistryParseError,
    RegistryReadError,
    RegistryValidationError,
)
from create_app.helpers.helpers_logging import print_debug
from create_app.helpers.yaml_loader import YAMLError, parse_yaml_text


@dataclass(frozen=True)
class Attribution:
    """Maintainer or organisation credited for a community template."""

    name: str | None = None
    url: str | None = None


@dataclass(frozen=True)
class CommunityTemplate:
    """A named community template entry.

    Attributes:
        name: Template name shown to users.
        source: Git specifier the template is fetched from (unique).
        description: Optional one-line description.
        maintainer: Optional maintainer attribution.
        organisation: Optional organisation attribution.
        display_name: Name plus attribution, e.g.
            ``Dashboard (by Jane Doe, org: Some Org)``.
    """

    name: str
    source: str
    display_name: str
    description: str | None = None
    maintainer: Attribution | None = None
    organisation: Attribution | None = None


def _required_string(
    value: object,
    field_path: str,
    registry_path: Path,
) -> str:
    if not isinstance(value, str) or not value.strip():
        raise RegistryValidationError(
            registry_path,
            field_path,
            "must be a non-empty string.",
        )
    return str(value).strip()


def _optional_string(
    value: object,
    field_path: str,
    registry_path: Path,
) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise RegistryValidationError(
            registry_path,
            field_path,
            "must be a non-empty string when provided.",
        )
    return str(value).strip()


def _optional_attribution(
    value: object,
    field_path: str,
    registry_path: Path,
) -> Attribution | None:
    """Validate an optional maintainer/organisation object.

    An object with neither ``name`` nor ``url`` counts as absent.
    """
    if value is None:
        return None
    if not isinstance(value, dict):
        raise RegistryValidationError(
            registry_path,
            field_path,
            "must be an object when provided.",
        )

    data = cast(dict[str, Any], value)
    name = _optional_string(data.get("name"), f"{field_path}.name", registry_path)
    url = _optional_string(data.get("url"), f"{field_path}.url", registry_path)
    if name is None and url is None:
        return None
    return Attribution(name=name, url=url)


def build_display_name(
    name: str,
    maintainer: Attribution | None = None,
    organisation: Attribution | None = None,
) -> str:
    """Compose the display name: maintainer first, then organisation."""
    parts: list[str] = []
    if maintainer is not None and maintainer.name:
        parts.append(f"by {maintainer.name}")
    if organisation is not None and organisation.name:
        parts.append(f"org: {organisation.name}")
    if not parts:
        return name
    return f"{name} ({', '.join(parts)})"


def _parse_entry(
    entry: object,
    index: int,
    registry_path: Path,
    known_sources: set[str],
) -> CommunityTemplate:
    prefix = f"templates[{index}]"
    if not isinstance(entry, dict):
        raise RegistryValidationError(registry_path, prefix, "must be an object.")

    data = cast(dict[str, Any], entry)
    name = _required_string(data.get("name"), f"{prefix}.name", registry_path)
    source = _required_string(data.get("source"), f"{prefix}.source", registry_path)

    if source in known_sources:
        raise RegistryValidationError(
            registry_path,
            f"{prefix}.source",
            f'duplicates template source "{source}".',
        )
    known_sources.add(source)

    description = _optional_string(
        data.get("description"), f"{prefix}.description", registry_path,
    )
    maintainer = _optional_attribution(
        data.get("maintainer"), f"{prefix}.maintainer", registry_path,
    )
    organisation = _optional_attribution(
        data.get("organisation"), f"{prefix}.organisation", registry_path,
    )

    return CommunityTemplate(
        name=name,
        source=source,
        display_name=build_display_name(name, maintainer, organisation),
        description=description,
        maintainer=maintainer,
        organisation=organisation,
    )


def load_community_templates(registry_path: Path) -> list[CommunityTemplate]:
    """Load and validate the community template registry.

    Args:
        registry_path: Path to the registry YAML document.

    Returns:
        Community templates in document order.

    Raises:
        RegistryReadError: If the document cannot be read or is not UTF-8.
        RegistryParseError: If the document is not valid YAML.
        RegistryValidationError: On the first schema violation.
    """
    try:
        content = registry_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise RegistryReadError(
            f'Failed to read community template registry "{registry_path}". {exc}',
            registry_path,
        ) from exc

    try:
        document = parse_yaml_text(content)
    except YAMLError as exc:
        raise RegistryParseError(
            f'Failed to parse community template registry "{registry_path}". {exc}',
            registry_path,
        ) from exc

    templates = document.get("templates") if isinstance(document, dict) else None
    if not isinstance(templates, list):
        raise RegistryValidationError(registry_path, "templates", "must be a list.")

    known_sources: set[str] = set()
    entries = [
        _parse_entry(entry, index, registry_path, known_sources)
        for index, entry in enumerate(cast(list[object], templates))
    ]
    print_debug(
        f"Loaded {len(entries)} community template(s) from {registry_path}"
    )
    return entries
