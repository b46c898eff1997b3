"""Copy a resolved template into a new project folder."""

from __future__ import annotations

import shutil
from pathlib import Path

from create_app.helpers.helpers_logging import print_debug

TEMPLATE_NAME_PLACEHOLDER = "{{template-name}}"

# Never copied from a template into the new project
_IGNORED_NAMES = (".git", "node_modules")

# Files whose content receives the project name
_NAMED_FILES = ("package.json", "src/AppWrapper.tsx")


def copy_template(template_path: Path, target_dir: Path, project_name: str) -> None:
    """Copy template files into ``target_dir`` and fill in the project name.

    Args:
        template_path: Validated template directory.
        target_dir: New project folder; must not exist yet.
        project_name: Value substituted for ``{{template-name}}``.

    Raises:
        FileExistsError: If ``target_dir`` already exists.
    """
    shutil.copytree(
        template_path,
        target_dir,
        ignore=shutil.ignore_patterns(*_IGNORED_NAMES),
    )

    for relative in _NAMED_FILES:
        file_path = target_dir / relative
        if not file_path.is_file():
            print_debug(f"File '{relative}' not present in template, skipping")
            continue
        content = file_path.read_text(encoding="utf-8")
        file_path.write_text(
            content.replace(TEMPLATE_NAME_PLACEHOLDER, project_name),
            encoding="utf-8",
        )
