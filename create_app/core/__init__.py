"""Core template source resolution logic."""

from create_app.core.community_templates import (
    CommunityTemplate,
    load_community_templates,
)
from create_app.core.errors import TemplateSourceError
from create_app.core.template_specifier import (
    TemplateSpecifier,
    is_git_template_specifier,
    parse_template_specifier,
)

__all__ = [
    "CommunityTemplate",
    "TemplateSourceError",
    "TemplateSpecifier",
    "is_git_template_specifier",
    "load_community_templates",
    "parse_template_specifier",
]
