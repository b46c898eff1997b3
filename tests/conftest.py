"""Shared fixtures for template resolution tests.

Provides template-directory builders, a resolver config rooted in
``tmp_path`` and a fake git executor so no test touches the network.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from create_app.helpers.helpers_logging import set_debug
from create_app.helpers.process import ProcessResult
from create_app.helpers.resolver_config import ResolverConfig


def write_template(path: Path, with_manifest: bool = True) -> Path:
    """Create a minimal template directory at *path*."""
    path.mkdir(parents=True, exist_ok=True)
    if with_manifest:
        (path / "package.json").write_text('{"name": "{{template-name}}"}\n')
    (path / "README.md").write_text("# Template\n")
    return path


class FakeGit:
    """Stand-in for ``run_process`` that simulates ``git clone``.

    Records every call. By default the clone target is created as a valid
    template; ``returncode``/``output`` simulate failures and
    ``with_manifest=False`` simulates a repository that is not a template.
    """

    def __init__(
        self,
        returncode: int = 0,
        output: str = "",
        with_manifest: bool = True,
    ) -> None:
        self.returncode = returncode
        self.output = output
        self.with_manifest = with_manifest
        self.calls: list[tuple[str, list[str]]] = []

    def __call__(
        self,
        command: str,
        args: Sequence[str],
        cwd: Path | None = None,
    ) -> ProcessResult:
        self.calls.append((command, list(args)))
        if self.returncode == 0:
            target = Path(args[-1])
            write_template(target, with_manifest=self.with_manifest)
            (target / ".git").mkdir()
        return ProcessResult(output=self.output, returncode=self.returncode)


@pytest.fixture(autouse=True)
def _reset_debug() -> None:
    """Keep debug output off between tests."""
    set_debug(False)


@pytest.fixture
def temp_root(tmp_path: Path) -> Path:
    """Base directory for temporary clones."""
    root = tmp_path / "clones"
    root.mkdir()
    return root


@pytest.fixture
def resolver_config(tmp_path: Path, temp_root: Path) -> ResolverConfig:
    """Resolver config with built-ins and clones under ``tmp_path``."""
    builtins_root = tmp_path / "builtins"
    return ResolverConfig(
        builtin_templates={
            "basic": write_template(builtins_root / "basic"),
            "react-router": write_template(builtins_root / "react-router"),
        },
        registry_path=tmp_path / "community-templates.yaml",
        temp_root=temp_root,
    )


@pytest.fixture
def fake_git() -> FakeGit:
    """Successful fake git executor."""
    return FakeGit()
