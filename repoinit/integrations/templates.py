"""Access to the .gitignore template catalog.

The catalog is listed from the github/gitignore repository contents API.
fetch_template_catalog() never raises: on any error it returns the static
fallback list so the selector always has something to offer.
"""

from __future__ import annotations

import logging

import httpx

from repoinit.config.settings import DEFAULT_TEMPLATE_LIST_URL, DEFAULT_TEMPLATE_RAW_URL
from repoinit.utils.console import print_warning
from repoinit.utils.errors import TemplateDownloadError
from repoinit.utils.logging import log_message

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".gitignore"

# The listing has no "empty" template; its .github entry is shown as None.
RESERVED_ENTRY = ".github"
NO_TEMPLATE = "None"

_TIMEOUT = 10.0  # seconds

FALLBACK_TEMPLATES: tuple[str, ...] = (
    "Android",
    "C",
    "C++",
    "CMake",
    "CUDA",
    "Dart",
    "Elixir",
    "Flutter",
    "Go",
    "Gradle",
    "Haskell",
    "Java",
    "Julia",
    "Kotlin",
    "Laravel",
    "Node",
    "None",
    "Python",
    "R",
    "Ruby",
    "Rust",
    "Scala",
    "Swift",
    "Unity",
)


def _parse_catalog(entries: object) -> list[str]:
    """Turn the contents listing into sorted template names.

    Args:
        entries: Decoded JSON body of the listing endpoint.

    Returns:
        Sorted, deduplicated names with the reserved entry renamed to None.
    """
    if not isinstance(entries, list):
        return []

    names: set[str] = set()
    for item in entries:
        if not isinstance(item, dict):
            continue
        name = item.get("name", "")
        if not isinstance(name, str):
            continue
        if name == RESERVED_ENTRY:
            names.add(name)
        elif name.endswith(TEMPLATE_SUFFIX) and len(name) > len(TEMPLATE_SUFFIX):
            names.add(name[: -len(TEMPLATE_SUFFIX)])

    return [NO_TEMPLATE if name == RESERVED_ENTRY else name for name in sorted(names)]


def fetch_template_catalog(
    list_url: str = DEFAULT_TEMPLATE_LIST_URL,
    timeout: float = _TIMEOUT,
) -> list[str]:
    """Fetch the list of available .gitignore templates.

    GET <list_url>
    Keeps entries named "<Template>.gitignore" and the reserved .github entry.

    Args:
        list_url: Contents API endpoint of the template repository.
        timeout: Request timeout in seconds.

    Returns:
        Sorted template names, or the fallback list on any error.
    """
    try:
        resp = httpx.get(
            list_url,
            headers={"Accept": "application/vnd.github+json"},
            timeout=timeout,
            follow_redirects=True,
        )
        resp.raise_for_status()
        catalog = _parse_catalog(resp.json())
    except Exception:
        logger.debug("Failed to fetch template catalog", exc_info=True)
        catalog = []

    if not catalog:
        print_warning("Could not fetch the template list, using the built-in list instead.")
        return list(FALLBACK_TEMPLATES)

    log_message(f"Fetched {len(catalog)} templates from {list_url}")
    return catalog


def template_download_url(name: str, raw_url: str = DEFAULT_TEMPLATE_RAW_URL) -> str:
    """Build the raw content URL for a template.

    Args:
        name: Template name with catalog casing (e.g. "Python").
        raw_url: Base URL of the raw template content.

    Returns:
        URL of the form <raw_url>/<name>.gitignore
    """
    return f"{raw_url.rstrip('/')}/{name}{TEMPLATE_SUFFIX}"


def download_template(
    name: str,
    raw_url: str = DEFAULT_TEMPLATE_RAW_URL,
    timeout: float = _TIMEOUT,
) -> str:
    """Download the content of a .gitignore template.

    Args:
        name: Template name with catalog casing.
        raw_url: Base URL of the raw template content.
        timeout: Request timeout in seconds.

    Returns:
        The template text.

    Raises:
        TemplateDownloadError: If the request fails for any reason.
    """
    url = template_download_url(name, raw_url)
    try:
        resp = httpx.get(url, timeout=timeout, follow_redirects=True)
        resp.raise_for_status()
    except Exception as e:
        logger.debug("Failed to download template %s", name, exc_info=True)
        raise TemplateDownloadError(f"Failed to download {url}: {e}") from e

    log_message(f"Downloaded template {name} ({len(resp.text)} chars)")
    return resp.text


__all__ = [
    "FALLBACK_TEMPLATES",
    "NO_TEMPLATE",
    "TEMPLATE_SUFFIX",
    "fetch_template_catalog",
    "template_download_url",
    "download_template",
]
