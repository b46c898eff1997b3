"""GitHub template specifier parsing.

Accepted forms:
    owner/repo
    owner/repo#ref
    https://github.com/owner/repo
    https://github.com/owner/repo.git#ref

Rules:
    1. At most one ``#``; the part after it is the ref and cannot be empty
    2. Refs cannot address a subdirectory (``#ref:subdir`` is rejected)
    3. URLs must point at github.com or www.github.com; extra path
       segments after ``owner/repo`` are ignored
    4. A trailing ``.git`` on the repository name is stripped

Telling a specifier apart from a built-in or community template key is the
caller's job: check those first and only parse what remains.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import urlsplit

from create_app.core.errors import InvalidSpecifierError, UnsupportedHostError

GITHUB_HOSTS = frozenset({"github.com", "www.github.com"})

_URL_PREFIX = "https://"
_REF_SEPARATOR = "#"
_SUBDIR_SEPARATOR = ":"
_GIT_SUFFIX = ".git"
_HTTPS_PORT = 443
_MIN_PATH_SEGMENTS = 2
_MAX_REF_PARTS = 2

# owner/repo shorthand
_SHORTHAND_PATTERN = re.compile(r"^([A-Za-z0-9_.-]+)/([^\s/]+)$")
# Anything shaped like owner/<something>, used for the fetch pre-check
_GIT_LOOKING_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+/\S+$")


@dataclass(frozen=True)
class TemplateSpecifier:
    """Parsed GitHub template specifier.

    Attributes:
        owner: Repository owner.
        repo: Repository name without a ``.git`` suffix.
        ref: Branch or tag to clone, or None for the default branch.
        repo_url: Normalized HTTPS clone URL.
        raw: Trimmed input the specifier was parsed from.
    """

    owner: str
    repo: str
    ref: str | None
    repo_url: str
    raw: str


def _invalid(raw: str, detail: str) -> InvalidSpecifierError:
    return InvalidSpecifierError(
        f'Invalid template source "{raw}". {detail}',
        raw,
    )


def _split_ref(raw: str) -> tuple[str, str | None]:
    """Split ``source#ref`` into its parts, validating the ref."""
    parts = raw.split(_REF_SEPARATOR)
    if len(parts) > _MAX_REF_PARTS:
        raise _invalid(raw, 'Use at most one "#" to specify a ref.')

    if len(parts) == 1:
        return raw, None

    source_without_ref, ref = parts
    if not ref.strip():
        raise _invalid(raw, 'Ref cannot be empty after "#".')
    if _SUBDIR_SEPARATOR in ref:
        raise _invalid(
            raw,
            'Subdirectory syntax "#ref:subdir" is not supported. '
            + 'Use "owner/repo" or "owner/repo#ref".',
        )
    return source_without_ref, ref.strip()


def _parse_url(raw: str, url: str) -> tuple[str, str]:
    """Extract owner and repo from a GitHub HTTPS URL."""
    try:
        parsed = urlsplit(url)
        host = parsed.hostname or ""
        port = parsed.port
    except ValueError as exc:
        raise _invalid(raw, "Use a valid GitHub repository URL.") from exc

    if port not in (None, _HTTPS_PORT):
        host = f"{host}:{port}"
    if host not in GITHUB_HOSTS:
        raise UnsupportedHostError(raw, host, sorted(GITHUB_HOSTS))

    segments = [segment for segment in parsed.path.split("/") if segment]
    if len(segments) < _MIN_PATH_SEGMENTS:
        raise _invalid(
            raw,
            f'Invalid GitHub repository path in "{url}". Use "owner/repo".',
        )
    return segments[0], segments[1]


def _parse_shorthand(raw: str, source: str) -> tuple[str, str]:
    """Extract owner and repo from ``owner/repo`` shorthand."""
    match = _SHORTHAND_PATTERN.match(source)
    if match is None:
        raise _invalid(raw, 'Use "owner/repo" or "owner/repo#ref".')
    return match.group(1), match.group(2)


def parse_template_specifier(template_source: str) -> TemplateSpecifier:
    """Parse a GitHub template specifier.

    Args:
        template_source: Raw specifier, e.g. ``owner/repo#main``.

    Returns:
        Parsed TemplateSpecifier.

    Raises:
        InvalidSpecifierError: If the specifier is malformed.
        UnsupportedHostError: If a URL points at a non-GitHub host.
    """
    raw = (template_source or "").strip()
    if not raw:
        raise InvalidSpecifierError("Template source cannot be empty.", raw)

    source_without_ref, ref = _split_ref(raw)

    if source_without_ref.startswith(_URL_PREFIX):
        owner, repo = _parse_url(raw, source_without_ref)
    else:
        owner, repo = _parse_shorthand(raw, source_without_ref)

    if repo.endswith(_GIT_SUFFIX):
        repo = repo[: -len(_GIT_SUFFIX)]

    if not owner or not repo:
        raise _invalid(raw, "Missing GitHub owner or repository name.")

    return TemplateSpecifier(
        owner=owner,
        repo=repo,
        ref=ref,
        repo_url=f"https://github.com/{owner}/{repo}{_GIT_SUFFIX}",
        raw=raw,
    )


def is_git_template_specifier(template_source: str) -> bool:
    """Check whether a source is a usable GitHub template specifier.

    URLs are accepted on shape alone; their host is checked when parsing so
    that a disallowed host produces a host-specific error. Shorthand goes
    through the full parser checks.
    """
    raw = (template_source or "").strip()
    if not raw:
        return False

    if raw.startswith(_URL_PREFIX):
        return True

    try:
        parse_template_specifier(raw)
    except InvalidSpecifierError:
        return False
    return True


def looks_like_git_source(template_source: str) -> bool:
    """Loose shape check: an https URL or something shaped ``owner/...``."""
    raw = (template_source or "").strip()
    return raw.startswith(_URL_PREFIX) or (
        _GIT_LOOKING_PATTERN.match(raw) is not None
    )
