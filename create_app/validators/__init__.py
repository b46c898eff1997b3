"""Validators for resolved templates."""

from create_app.validators.template_directory import validate_template_directory

__all__ = ["validate_template_directory"]
