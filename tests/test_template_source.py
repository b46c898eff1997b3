"""Tests for template_source module - classification and unified resolution."""

from pathlib import Path

import pytest

from create_app.core.community_templates import CommunityTemplate
from create_app.core.errors import (
    InvalidTemplateDirectoryError,
    TemplateResolutionError,
    UnknownTemplateError,
)
from create_app.core.template_source import (
    ResolvedTemplateSource,
    classify_template_source,
    resolve_template,
)
from create_app.helpers.resolver_config import ResolverConfig
from tests.conftest import FakeGit


def _community(name: str, source: str) -> CommunityTemplate:
    return CommunityTemplate(name=name, source=source, display_name=name)


_COMMUNITY = [
    _community("Dashboard", "some-org/dashboard#main"),
    _community("Minimal", "https://github.com/someone/minimal"),
]


class TestClassifyTemplateSource:
    """Tests for classify_template_source()."""

    def test_community_match(self) -> None:
        assert classify_template_source(
            "some-org/dashboard#main", _COMMUNITY,
        ) == ResolvedTemplateSource(
            kind="community",
            source="some-org/dashboard#main",
            name="Dashboard",
        )

    def test_match_uses_trimmed_source(self) -> None:
        resolved = classify_template_source(
            "  https://github.com/someone/minimal ", _COMMUNITY,
        )
        assert resolved.kind == "community"
        assert resolved.name == "Minimal"

    def test_match_is_exact(self) -> None:
        resolved = classify_template_source("some-org/dashboard", _COMMUNITY)
        assert resolved == ResolvedTemplateSource(
            kind="external", source="some-org/dashboard",
        )

    def test_invalid_source_is_still_external(self) -> None:
        resolved = classify_template_source("owner/repo#a#b", _COMMUNITY)
        assert resolved.kind == "external"
        assert resolved.name is None

    def test_builtin_keys_match_first(self) -> None:
        resolved = classify_template_source(
            "basic", [_community("Shadow", "basic")], ["basic", "react-router"],
        )
        assert resolved == ResolvedTemplateSource(
            kind="builtin", source="basic", name="basic",
        )


class TestResolveTemplate:
    """Tests for resolve_template()."""

    def test_builtin_has_noop_cleanup(
        self,
        resolver_config: ResolverConfig,
        fake_git: FakeGit,
    ) -> None:
        fetched = resolve_template("react-router", resolver_config, execute=fake_git)

        assert fetched.template_path == resolver_config.builtin_templates["react-router"]
        fetched.cleanup()
        assert fetched.template_path.is_dir()
        assert fake_git.calls == []

    def test_broken_builtin_fails_validation(
        self,
        resolver_config: ResolverConfig,
        fake_git: FakeGit,
    ) -> None:
        (resolver_config.builtin_templates["basic"] / "package.json").unlink()

        with pytest.raises(InvalidTemplateDirectoryError) as exc:
            resolve_template("basic", resolver_config, execute=fake_git)
        assert exc.value.reason == "missing-marker"

    def test_community_source_is_cloned(
        self,
        resolver_config: ResolverConfig,
        fake_git: FakeGit,
        temp_root: Path,
    ) -> None:
        with resolve_template(
            "some-org/dashboard#main", resolver_config, _COMMUNITY, execute=fake_git,
        ) as fetched:
            assert (fetched.template_path / "package.json").is_file()

        [(_command, args)] = fake_git.calls
        assert "https://github.com/some-org/dashboard.git" in args
        assert list(temp_root.iterdir()) == []

    def test_unknown_source_names_alternatives(
        self,
        resolver_config: ResolverConfig,
        fake_git: FakeGit,
    ) -> None:
        with pytest.raises(UnknownTemplateError) as exc:
            resolve_template("fancy", resolver_config, _COMMUNITY, execute=fake_git)

        assert exc.value.community_sources == (
            "some-org/dashboard#main",
            "https://github.com/someone/minimal",
        )

    def test_external_failure_is_wrapped(
        self,
        resolver_config: ResolverConfig,
    ) -> None:
        with pytest.raises(TemplateResolutionError, match="Failed to resolve template"):
            resolve_template(
                "owner/missing", resolver_config, execute=FakeGit(returncode=128),
            )
