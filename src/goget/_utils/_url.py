"""URL templating and composition."""

import re
from typing import Mapping, Optional

_PLACEHOLDER = re.compile(r"\{(\w+)\}")
_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


def interpolate(template: str, params: Mapping[str, Optional[str]]) -> str:
    """Substitute ``{name}`` placeholders in a URL template.

    A placeholder whose parameter is missing, or encoded to ``None``, is
    replaced by its own name so the unresolved part stays visible in the URL.

    Args:
        template: URL template, e.g. ``"http://{host}/v1"``.
        params: Encoded parameters keyed by placeholder name.

    Returns:
        The interpolated URL.

    Examples:
        >>> interpolate("http://{host}/v1", {"host": "api.test"})
        'http://api.test/v1'
        >>> interpolate("http://{host}", {})
        'http://host'
    """

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        value = params.get(name)
        return name if value is None else value

    return _PLACEHOLDER.sub(_substitute, template)


def template_names(template: str) -> list[str]:
    """Return the placeholder names referenced by a URL template, in order."""
    return _PLACEHOLDER.findall(template)


def is_absolute(url: str) -> bool:
    return _SCHEME.match(url) is not None


def join_url(base: str, url: Optional[str]) -> str:
    """Compose a base URL with a request URL.

    An empty ``url`` keeps ``base``, an absolute ``url`` replaces it and a
    relative one is appended with exactly one ``/`` in between.

    Examples:
        >>> join_url("http://api.test/v1", "users")
        'http://api.test/v1/users'
        >>> join_url("http://api.test/v1/", "/users")
        'http://api.test/v1/users'
        >>> join_url("http://api.test", "https://other.test")
        'https://other.test'
    """
    if not url:
        return base
    if not base or is_absolute(url):
        return url
    if base.endswith("/") and url.startswith("/"):
        return base + url[1:]
    if not base.endswith("/") and not url.startswith("/"):
        return f"{base}/{url}"
    return base + url
