"""Read-only accessors for the request a navigation is bound to."""

from typing import Optional


def get_request_url(request) -> Optional[str]:
    """Return the query string of `request`, which is how navigation URLs are addressed."""
    if request is None:
        return None
    return request.META.get("QUERY_STRING") or None


def get_referer_url(request) -> Optional[str]:
    """Return the referer header of `request`, if the client sent one."""
    if request is None:
        return None
    return request.META.get("HTTP_REFERER") or None
