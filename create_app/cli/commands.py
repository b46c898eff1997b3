#!/usr/bin/env python3
"""create-app CLI - Main Entry Point.

Usage:
    create-app <command> [options]

Commands:
    init             Create a new application from a template
    list-templates   List built-in and community templates
    check-template   Resolve and validate a template source without using it

Template sources:
    basic, react-router                   built-in templates
    owner/repo, owner/repo#ref            GitHub shorthand
    https://github.com/owner/repo[#ref]   GitHub URL
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from create_app.core.community_templates import (
    CommunityTemplate,
    load_community_templates,
)
from create_app.core.errors import TemplateSourceError
from create_app.core.project_writer import copy_template
from create_app.core.template_source import resolve_template
from create_app.helpers.helpers_logging import (
    Colors,
    print_error,
    print_header,
    print_info,
    print_success,
    print_warning,
    set_debug,
)
from create_app.helpers.resolver_config import (
    ResolverConfig,
    detect_package_manager,
    load_resolver_config,
)

DEFAULT_TEMPLATE = "basic"

# Exit code for Ctrl-C / click.Abort
_EXIT_CANCELLED = 130

_registry_option = click.option(
    "--registry",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Community template registry (YAML)",
)


def _load_context(
    registry: Path | None,
) -> tuple[ResolverConfig, list[CommunityTemplate]]:
    """Build the resolver config and load the community registry."""
    config = load_resolver_config(registry_path=registry)
    community_templates = load_community_templates(config.registry_path)
    return config, community_templates


@click.group()
@click.option("--debug", is_flag=True, help="Show debug output")
def _click_cli(debug: bool) -> None:
    """Create a new application from a built-in, community or GitHub template."""
    set_debug(debug)


@_click_cli.command(name="list-templates", help="List available templates")
@_registry_option
def list_templates_cmd(registry: Path | None) -> int:
    config, community_templates = _load_context(registry)

    print_header("Built-in templates")
    for key in config.builtin_keys:
        print(f"  {key}")

    print_header("Community templates")
    if not community_templates:
        print_info("  (none)")
    for template in community_templates:
        print(f"  {template.display_name}")
        print(f"    {Colors.DIM}{template.source}{Colors.ENDC}")
        if template.description:
            print(f"    {template.description}")
    return 0


@_click_cli.command(
    name="check-template",
    help="Resolve and validate a template source, then clean up",
)
@click.argument("source")
@_registry_option
def check_template_cmd(source: str, registry: Path | None) -> int:
    config, community_templates = _load_context(registry)

    print_info(f"Resolving template '{source}'...")
    with resolve_template(source, config, community_templates) as fetched:
        print_success(f"Template '{source}' is valid ({fetched.template_path})")
    return 0


@_click_cli.command(name="init", help="Create a new application")
@click.argument("name")
@click.option(
    "--template",
    "template_source",
    default=DEFAULT_TEMPLATE,
    show_default=True,
    help="Built-in key, community source or GitHub specifier",
)
@click.option(
    "--package-manager",
    default=None,
    help="Package manager to suggest (defaults to the invoking one)",
)
@_registry_option
def init_cmd(
    name: str,
    template_source: str,
    package_manager: str | None,
    registry: Path | None,
) -> int:
    target_dir = Path.cwd() / name
    if target_dir.exists():
        print_error(
            f'The folder "{name}" already exists. '
            + "Please either delete it, or choose a different name."
        )
        return 1

    pkg_manager = package_manager or detect_package_manager(
        os.environ.get("npm_config_user_agent"),
    )
    if pkg_manager == "yarn":
        print_warning(
            'We recommend using "pnpm" as a package manager for new projects.'
        )

    config, community_templates = _load_context(registry)

    print_info(f"Resolving template '{template_source}'...")
    fetched = resolve_template(template_source, config, community_templates)
    try:
        print_info("Copying template files")
        copy_template(fetched.template_path, target_dir, name)
    finally:
        fetched.cleanup()

    print_success(f"Created {name} from template '{template_source}'")
    print(
        f"Run {Colors.BOLD}cd {name} && {pkg_manager} install && "
        + f"{pkg_manager} start{Colors.ENDC} to launch your new application"
    )
    return 0


def main() -> int:
    """Main CLI entry point."""
    try:
        result = _click_cli.main(
            args=sys.argv[1:],
            prog_name="create-app",
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return _EXIT_CANCELLED
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except TemplateSourceError as exc:
        exc.print_error()
        return 1

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
