"""Fetch GitHub-hosted templates into a temporary directory.

Lifecycle of a fetch:
    1. Reject sources that do not look like Git (no I/O yet)
    2. Parse the specifier
    3. Create a fresh temporary directory for this fetch only
    4. Shallow clone (depth 1) into ``<tmp>/repo``, requesting the ref
       directly when one is given
    5. Validate the clone as a template directory
    6. On any failure in 3-5, remove the temporary directory, then raise
    7. On success, hand the caller a FetchedTemplate; the caller owns the
       obligation to call ``cleanup`` exactly once

There are no retries: a failed clone fails the resolution.
"""

from __future__ import annotations

import shutil
import tempfile
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from types import TracebackType

from create_app.core.errors import (
    CloneFailureError,
    TemplateResolutionError,
    TemplateSourceError,
    TemporaryDirectoryError,
    UnknownTemplateError,
)
from create_app.core.template_specifier import (
    TemplateSpecifier,
    looks_like_git_source,
    parse_template_specifier,
)
from create_app.helpers.helpers_logging import print_debug
from create_app.helpers.process import Executor, run_process
from create_app.helpers.resolver_config import ResolverConfig
from create_app.validators.template_directory import validate_template_directory

_CLONE_SUBDIR = "repo"


def _noop() -> None:
    return None


@dataclass
class FetchedTemplate:
    """A resolved template directory plus the obligation to clean it up.

    Can be used as a context manager; leaving the block runs ``cleanup``.
    """

    template_path: Path
    cleanup: Callable[[], None] = field(default=_noop)

    def __enter__(self) -> FetchedTemplate:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.cleanup()


def _make_cleanup(temp_base: Path) -> Callable[[], None]:
    """Return a cleanup that removes ``temp_base``; safe to call twice."""

    def cleanup() -> None:
        if temp_base.exists():
            shutil.rmtree(temp_base)
            print_debug(f"Removed temporary template directory {temp_base}")

    return cleanup


def build_clone_args(specifier: TemplateSpecifier, target: Path) -> list[str]:
    """Build ``git clone`` arguments for a shallow single-ref clone."""
    args = ["clone", "--depth", "1"]
    if specifier.ref:
        args += ["--branch", specifier.ref]
    args += [specifier.repo_url, str(target)]
    return args


def _create_temp_base(source: str, config: ResolverConfig) -> Path:
    """Create the per-fetch temporary directory."""
    try:
        if config.temp_root is not None:
            config.temp_root.mkdir(parents=True, exist_ok=True)
        temp_base = Path(
            tempfile.mkdtemp(prefix=config.temp_prefix, dir=config.temp_root)
        )
    except OSError as exc:
        raise TemporaryDirectoryError(
            source, config.temp_root, exc.strerror or str(exc),
        ) from exc
    print_debug(f"Created temporary template directory {temp_base}")
    return temp_base


def _clone_and_validate(
    specifier: TemplateSpecifier,
    source: str,
    clone_path: Path,
    config: ResolverConfig,
    execute: Executor,
) -> None:
    args = build_clone_args(specifier, clone_path)
    print_debug(f"Running: {config.git_command} {' '.join(args)}")
    result = execute(config.git_command, args)
    if result.returncode != 0:
        raise CloneFailureError(
            source,
            specifier.repo_url,
            specifier.ref,
            result.returncode,
            result.output,
        )
    validate_template_directory(clone_path, source, config.marker_file)


def fetch_template(
    template_source: str,
    config: ResolverConfig,
    execute: Executor = run_process,
    community_sources: Sequence[str] = (),
) -> FetchedTemplate:
    """Fetch a GitHub template with a shallow clone.

    Args:
        template_source: Raw Git specifier, e.g. ``owner/repo#main``.
        config: Resolver configuration.
        execute: Process executor used to run git.
        community_sources: Known community sources, listed in the
            unknown-template error.

    Returns:
        FetchedTemplate pointing at the validated clone.

    Raises:
        UnknownTemplateError: If the source does not look like Git at all.
        TemplateResolutionError: If parsing, temporary directory creation,
            cloning or validation fails.
    """
    source = (template_source or "").strip()

    if not looks_like_git_source(source):
        raise UnknownTemplateError(source, config.builtin_keys, community_sources)

    try:
        specifier = parse_template_specifier(source)
    except TemplateSourceError as exc:
        raise TemplateResolutionError(source, exc) from exc

    try:
        temp_base = _create_temp_base(source, config)
    except TemplateSourceError as exc:
        raise TemplateResolutionError(source, exc) from exc
    cleanup = _make_cleanup(temp_base)
    clone_path = temp_base / _CLONE_SUBDIR

    try:
        _clone_and_validate(specifier, source, clone_path, config, execute)
    except TemplateSourceError as exc:
        cleanup()
        raise TemplateResolutionError(source, exc) from exc
    except BaseException:
        cleanup()
        raise

    return FetchedTemplate(template_path=clone_path, cleanup=cleanup)
