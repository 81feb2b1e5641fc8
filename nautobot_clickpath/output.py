"""Output sinks the navigation writes inline links into."""

from abc import ABC, abstractmethod

from django.utils.html import conditional_escape, format_html
from django.utils.safestring import mark_safe


def render_anchor(text: str, url: str) -> str:
    """Render an anchor pointing at the navigation URL `url`."""
    return format_html("<a href='?{}'>{}</a>", url, text)


class OutputSink(ABC):
    """Something a page is rendered into."""

    @abstractmethod
    def output(self, fragment: str, raw: bool = False):
        """Write `fragment`; escape it unless `raw` is set."""


class HTMLOutput(OutputSink):
    """Buffer of HTML fragments, rendered in order."""

    def __init__(self):
        """Start with an empty buffer."""
        self.fragments = []

    def output(self, fragment: str, raw: bool = False):
        """Append `fragment`, escaped unless `raw`."""
        self.fragments.append(mark_safe(fragment) if raw else conditional_escape(fragment))  # noqa: S308

    def render(self) -> str:
        """Join all fragments into a safe string."""
        return mark_safe("".join(self.fragments))  # noqa: S308

    def __str__(self):
        """Render the buffer."""
        return self.render()
