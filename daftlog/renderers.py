"""Error renderers: turn a dispatch error and its request into a page body.

Renderers are registered under a short kind name with `register_renderer`,
and CatchingHttpHandler builds its chain from `ERROR_RENDERERS` entries
naming those kinds.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple, Type

from markupsafe import escape

from .domain import RendererSpec
from .errors import describe_error, error_location, error_trace

logger = logging.getLogger(__name__)


class ErrorRenderer(ABC):
    mimetype = "text/plain"

    @abstractmethod
    def render(self, error: BaseException, request) -> Optional[str]:
        """Return the page body, or None to leave the error to other renderers."""


RENDERERS: Dict[str, Type[ErrorRenderer]] = {}


def register_renderer(kind: str):
    """@register_renderer("plain_text")"""
    def deco(cls):
        if kind in RENDERERS:
            raise ValueError(f"Renderer kind {kind!r} is already registered")
        RENDERERS[kind] = cls
        return cls
    return deco


def resolve_renderer(kind: str) -> Optional[type]:
    # the interface name resolves too, so config validation can reject it by name
    if kind == ErrorRenderer.__name__:
        return ErrorRenderer
    return RENDERERS.get(kind)


def build_renderer(spec: RendererSpec) -> ErrorRenderer:
    return RENDERERS[spec.kind](*spec.args)


@register_renderer("plain_text")
class PlainTextRenderer(ErrorRenderer):
    def __init__(self, trace: bool = True, trace_limit: Optional[int] = None):
        self.trace = trace
        self.trace_limit = trace_limit

    def render(self, error, request):
        out = describe_error(error)
        if self.trace:
            frames = error_trace(error, self.trace_limit)
            lines = [f"#{i} {f}:{n} {name}" for i, (f, n, name) in enumerate(frames)]
            out += "\n\nStack trace:\n" + "\n".join(lines)
        return out


@register_renderer("json")
class JsonRenderer(ErrorRenderer):
    mimetype = "application/json"

    def __init__(self, trace: bool = False, pretty: bool = False):
        self.trace = trace
        self.pretty = pretty

    def render(self, error, request):
        filename, lineno = error_location(error)
        payload = {
            "error": {
                "type": type(error).__name__,
                "message": str(error),
                "file": filename,
                "line": lineno,
            }
        }
        if self.trace:
            payload["error"]["trace"] = [
                {"file": f, "line": n, "function": name}
                for f, n, name in error_trace(error)
            ]
        # plain json: renderers run outside any Flask app context, so no jsonify
        return json.dumps(payload, indent=2 if self.pretty else None)


@register_renderer("html")
class HtmlRenderer(ErrorRenderer):
    mimetype = "text/html"

    def __init__(self, title: str = "Internal Server Error", trace: bool = True):
        self.title = title
        self.trace = trace

    def render(self, error, request):
        parts = [
            "<!doctype html>",
            f"<title>{escape(self.title)}</title>",
            f"<h1>{escape(self.title)}</h1>",
            f"<p>{escape(describe_error(error))}</p>",
        ]
        if request is not None:
            parts.append(f"<p>{escape(request.method)} {escape(request.url)}</p>")
        if self.trace:
            items = "".join(
                f"<li>{escape(f)}:{n} <code>{escape(name)}</code></li>"
                for f, n, name in error_trace(error)
            )
            parts.append(f"<ol>{items}</ol>")
        return "\n".join(parts)


class ErrorRendererChain:
    """Ordered, read-only renderers; safe to share between concurrent requests."""

    def __init__(self, renderers):
        self._renderers = tuple(renderers)

    @classmethod
    def from_config(cls, handler_config) -> "ErrorRendererChain":
        renderers = [build_renderer(spec) for spec in handler_config.renderers]
        logger.debug("Error renderer chain: %s",
                     ", ".join(spec.display for spec in handler_config.renderers))
        return cls(renderers)

    @property
    def renderers(self) -> Tuple[ErrorRenderer, ...]:
        return self._renderers

    def __len__(self):
        return len(self._renderers)

    def render(self, error: BaseException, request) -> Tuple[str, str]:
        """Body joined from every renderer's output, and the first renderer's mimetype."""
        bodies = [r.render(error, request) for r in self._renderers]
        bodies = [b for b in bodies if b is not None]
        mimetype = self._renderers[0].mimetype if self._renderers else "text/plain"
        if not bodies:
            return describe_error(error), mimetype
        return "\n".join(bodies), mimetype
