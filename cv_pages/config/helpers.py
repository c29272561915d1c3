"""Utility helpers shared by the cv_pages configuration loader.

Besides small value normalisers, this module works out where the CV will be
published. GitHub Pages and GitLab Pages serve project sites from a
sub-path named after the repository, while Vercel and Netlify expose the
deployment URL through environment variables.
"""

from __future__ import annotations

import logging
import os
import re
import typing as typ

from .models import SiteConfigError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

_UNSAFE_PATH_CHARS = re.compile(r"[^\w-]")


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _string_list(value: object | None, *, field: str) -> list[str] | None:
    """Normalize a YAML list into stripped strings; ``None`` when absent.

    Raises
    ------
    SiteConfigError
        If ``value`` is neither a string nor a list.
    """
    match value:
        case None:
            return None
        case str() as text:
            return [text.strip()] if text.strip() else []
        case list() as items:
            return [text for item in items if (text := _optional_str(item))]
        case _:
            msg = f"'{field}' must be a string or a list of strings."
            raise SiteConfigError(msg)


def create_base_path(name: str | None) -> str:
    """Return ``/<name>/`` with unsafe characters removed, or ``/``.

    Examples
    --------
    >>> create_base_path("my-repo")
    '/my-repo/'
    >>> create_base_path("my/repo")
    '/myrepo/'
    >>> create_base_path("")
    '/'
    """
    if not name:
        return "/"
    sanitized = _UNSAFE_PATH_CHARS.sub("", name)
    return f"/{sanitized}/" if sanitized else "/"


def resolve_base_path(env: cabc.Mapping[str, str] | None = None) -> str:
    """Return the URL path the site is served from in CI deployments.

    Parameters
    ----------
    env : Mapping[str, str], optional
        Environment variables to inspect; defaults to ``os.environ``.

    Returns
    -------
    str
        ``/<repo>/`` under GitHub Actions (``GITHUB_REPOSITORY``) or GitLab CI
        (``CI_PROJECT_PATH``), otherwise ``/``.
    """
    env = os.environ if env is None else env
    if env.get("GITHUB_ACTIONS") and env.get("GITHUB_REPOSITORY"):
        _, _, repo_name = env["GITHUB_REPOSITORY"].partition("/")
        return create_base_path(repo_name)
    if env.get("CI_PROJECT_PATH"):
        return create_base_path(env["CI_PROJECT_PATH"].split("/")[-1])
    return "/"


def resolve_base_url(
    env: cabc.Mapping[str, str] | None = None, homepage: str | None = None
) -> str:
    """Return the absolute URL the CV is published at.

    Parameters
    ----------
    env : Mapping[str, str], optional
        Environment variables to inspect; defaults to ``os.environ``.
    homepage : str, optional
        Configured homepage used when no hosting platform is detected.

    Returns
    -------
    str
        The deployment URL, checked in this order: GitHub Pages, GitLab
        Pages, Vercel, Netlify, ``homepage``. Falls back to ``/`` (with a
        warning) when none applies.
    """
    env = os.environ if env is None else env
    if env.get("GITHUB_ACTIONS"):
        owner = env.get("GITHUB_REPOSITORY_OWNER", "")
        return f"https://{owner}.github.io{resolve_base_path(env)}"
    if env.get("CI_PROJECT_PATH"):
        namespace = env.get("CI_PROJECT_ROOT_NAMESPACE", "")
        return f"https://{namespace}.gitlab.io{resolve_base_path(env)}"
    if env.get("VERCEL_URL"):
        return f"https://{env['VERCEL_URL']}"
    if env.get("NETLIFY"):
        return env.get("URL") or f"https://{env.get('NETLIFY_SITE_NAME', '')}.netlify.app"
    if homepage:
        return homepage if homepage.endswith("/") else f"{homepage}/"

    logger.warning("Could not determine base URL. Meta tags may not work correctly.")
    return "/"


__all__ = [
    "_optional_str",
    "_string_list",
    "create_base_path",
    "resolve_base_path",
    "resolve_base_url",
]
