"""Document location fields (``dh``, ``dp``, ``dt``)."""

from typing import Any, Optional, Tuple
from urllib.parse import urlsplit

from ga_universal.domains.events import Facade
from ga_universal.domains.mapping.common import Payload


def split_url(url: Any, include_query: bool = True) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(hostname, path)`` for ``url``; either may be ``None``.

    Non-string and unparsable values yield ``(None, None)``.
    """
    if not isinstance(url, str) or not url:
        return None, None
    try:
        parts = urlsplit(url)
        hostname = parts.hostname
    except ValueError:
        return None, None

    path = parts.path
    if not path and parts.netloc and parts.scheme in ("http", "https"):
        path = "/"
    if include_query and parts.query:
        path = f"{path}?{parts.query}"
    return hostname or None, path or None


def _location(url: Any, include_query: bool) -> Payload:
    hostname, path = split_url(url, include_query)
    form: Payload = {}
    if hostname:
        form["dh"] = hostname
    if path:
        form["dp"] = path
    return form


def location_fields(event: Facade) -> Payload:
    """Hostname and path from ``properties.url``, else ``context.page.url``.

    The path keeps its query string.
    """
    url = event.proxy("properties.url") or event.proxy("context.page.url")
    return _location(url, include_query=True)


def page_context_fields(event: Facade) -> Payload:
    """Hostname, bare path and title from ``context.page``."""
    form = _location(event.proxy("context.page.url"), include_query=False)
    title = event.proxy("context.page.title")
    if title is not None:
        form["dt"] = title
    return form
