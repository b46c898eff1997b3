"""
create-app

Scaffolds a new application from a built-in template, a community
registry template or a GitHub-hosted template.
"""

__version__ = "0.1.0"

from create_app.cli.commands import main
from create_app.core.template_fetcher import FetchedTemplate, fetch_template
from create_app.core.template_source import (
    ResolvedTemplateSource,
    classify_template_source,
    resolve_template,
)

__all__ = [
    "FetchedTemplate",
    "ResolvedTemplateSource",
    "classify_template_source",
    "fetch_template",
    "main",
    "resolve_template",
]
