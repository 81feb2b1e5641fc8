"""Path-safety checks for navigation URLs."""

import logging
import posixpath
import re
from pathlib import Path
from typing import Iterable, List, Optional, Tuple
from urllib.parse import parse_qsl

from nautobot_clickpath.utils import get_app_setting

logger = logging.getLogger("nautobot.clickpath")

_SAFE_PATH_RE = re.compile(r"[A-Za-z0-9_\-./]+")


class PagePathValidator:
    """Validate that a navigation URL stays inside the page namespace.

    Navigation URLs are query strings such as `page=common/login&op=submit`. The values of the
    namespace keys (`page` or `popup` by default) are page paths. Each must be relative,
    free of `..` traversal and made of safe characters. When `page_root` is set, the path must
    also resolve to a location inside that directory.
    """

    def __init__(self, namespace_keys: Iterable[str] = ("page", "popup"), page_root: Optional[str] = None):
        """Initialize the validator."""
        self.namespace_keys = tuple(namespace_keys)
        self.page_root = Path(page_root).resolve() if page_root else None

    @classmethod
    def from_settings(cls):
        """Build a validator from the app settings."""
        return cls(
            namespace_keys=get_app_setting("page_namespace_keys"),
            page_root=get_app_setting("page_root") or None,
        )

    def page_paths(self, url: str) -> List[Tuple[str, str]]:
        """Return every `(key, path)` pair of `url` whose key is a namespace key."""
        return [
            (key, value)
            for key, value in parse_qsl(url.lstrip("?"), keep_blank_values=True)
            if key in self.namespace_keys
        ]

    def validate(self, url: Optional[str]) -> bool:
        """Return True if `url` names a page inside the permitted namespace.

        Every namespace value is checked, and a namespace key may appear only once: frameworks
        disagree on which of several repeated values a handler gets.
        """
        if not url:
            return False
        pairs = self.page_paths(url)
        if not pairs:
            logger.debug("No page path found in %r", url)
            return False
        keys = [key for key, _ in pairs]
        if len(keys) != len(set(keys)):
            logger.debug("Repeated page key in %r", url)
            return False
        return all(self._is_safe_path(path, url) for _, path in pairs)

    def _is_safe_path(self, path: str, url: str) -> bool:
        if not path:
            logger.debug("Empty page path in %r", url)
            return False
        if path.startswith("/") or not _SAFE_PATH_RE.fullmatch(path):
            logger.debug("Unsafe page path %r in %r", path, url)
            return False

        normalized = posixpath.normpath(path)
        if normalized == ".." or normalized.startswith("../"):
            logger.debug("Page path %r escapes the page namespace", path)
            return False

        if self.page_root is not None:
            resolved = (self.page_root / normalized).resolve()
            if resolved != self.page_root and self.page_root not in resolved.parents:
                logger.debug("Page path %r resolves outside of %s", path, self.page_root)
                return False
        return True
