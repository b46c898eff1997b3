"""Template source classification and resolution.

A raw template source is classified once:

    builtin    - a template key shipped with this package
    community  - exact match of a community registry ``source``
    external   - anything else, handed to the Git fetcher

Classification never fails; invalid sources surface when fetched.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from create_app.core.community_templates import CommunityTemplate
from create_app.core.template_fetcher import FetchedTemplate, fetch_template
from create_app.helpers.helpers_logging import print_debug
from create_app.helpers.process import Executor, run_process
from create_app.helpers.resolver_config import ResolverConfig
from create_app.validators.template_directory import validate_template_directory

TemplateKind = Literal["builtin", "community", "external"]


@dataclass(frozen=True)
class ResolvedTemplateSource:
    """Classified template source.

    Attributes:
        kind: Template origin.
        source: Trimmed raw source (the built-in key for built-ins).
        name: Template name for built-in and community templates.
    """

    kind: TemplateKind
    source: str
    name: str | None = None


def classify_template_source(
    template_source: str,
    community_templates: Sequence[CommunityTemplate] = (),
    builtin_keys: Sequence[str] = (),
) -> ResolvedTemplateSource:
    """Classify a raw template source.

    Args:
        template_source: Raw source from the CLI.
        community_templates: Loaded community registry entries.
        builtin_keys: Built-in template keys, matched before the registry.

    Returns:
        ResolvedTemplateSource describing the origin.
    """
    source = (template_source or "").strip()

    if source in builtin_keys:
        return ResolvedTemplateSource(kind="builtin", source=source, name=source)

    for template in community_templates:
        if template.source == source:
            return ResolvedTemplateSource(
                kind="community",
                source=template.source,
                name=template.name,
            )

    return ResolvedTemplateSource(kind="external", source=source)


def resolve_template(
    template_source: str,
    config: ResolverConfig,
    community_templates: Sequence[CommunityTemplate] = (),
    execute: Executor = run_process,
) -> FetchedTemplate:
    """Resolve any template source to a validated template directory.

    Built-in templates are validated in place and get a no-op cleanup;
    community and external sources are cloned by ``fetch_template``.

    Raises:
        TemplateSourceError: Any resolution failure (see ``fetch_template``).
    """
    resolved = classify_template_source(
        template_source,
        community_templates,
        config.builtin_keys,
    )
    print_debug(f"Template source '{resolved.source}' classified as {resolved.kind}")

    if resolved.kind == "builtin":
        template_path = config.builtin_templates[resolved.source]
        validate_template_directory(template_path, resolved.source, config.marker_file)
        return FetchedTemplate(template_path=template_path)

    return fetch_template(
        resolved.source,
        config,
        execute=execute,
        community_sources=[template.source for template in community_templates],
    )
