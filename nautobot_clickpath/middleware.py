"""Request integration for click-path navigation."""

import logging
from functools import wraps

from nautobot_clickpath.engine import NavigationEngine
from nautobot_clickpath.utils import get_app_setting

logger = logging.getLogger("nautobot.clickpath")


class ClickPathMiddleware:
    """Attach a loaded `NavigationEngine` to every request as `request.nav`.

    When `persist_on_response` is enabled, the offered links are saved after the view ran.
    Responses with a 5xx status persist nothing, so a failed page keeps the previous grants.
    """

    def __init__(self, get_response):
        """Wrap the next handler of the middleware chain."""
        self.get_response = get_response

    def __call__(self, request):
        request.nav = NavigationEngine.for_request(request)
        request.nav.load_state()

        response = self.get_response(request)

        if get_app_setting("persist_on_response") and response.status_code < 500:
            request.nav.save()
            request.nav.flush()
        return response


def require_offered_link(fallback_url: str):
    """Only run the view if the requested URL was offered by the previous page.

    Requests for URLs that were never offered are redirected to `fallback_url`. Requires
    `ClickPathMiddleware`.
    """

    def decorator(view_func):
        @wraps(view_func)
        def _wrapped_view(request, *args, **kwargs):
            nav = request.nav
            if nav.validation_enabled() and not nav.check_request_url():
                logger.info("%s requested %s without a link, redirecting", nav.actor, nav.get_request_url())
                return nav.redirect(fallback_url)
            return view_func(request, *args, **kwargs)

        return _wrapped_view

    return decorator
