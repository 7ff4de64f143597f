import logging
import os
from collections.abc import Mapping
from urllib.parse import urlsplit

from flask import Flask
from werkzeug.exceptions import NotFound
from werkzeug.wrappers import Request, Response

from .config import SOURCES, Config
from .errors import ConfigurationError
from .routes import register_blueprints

logger = logging.getLogger(__name__)


class Framework:
    """
    Base URL, base path and config shared by every handler.
    The config is opaque here; subclasses pick the keys they understand.
    """

    def __init__(self, base_url: str, base_path: str, config=None):
        parts = urlsplit(base_url or "")
        if parts.scheme not in ("http", "https") or not parts.netloc or not parts.path.endswith("/"):
            raise ConfigurationError("Base URL must be an absolute http(s) URL ending with /!")
        if not base_path or not os.path.isdir(base_path):
            raise ConfigurationError("Base path must be a directory!")
        if config is not None and not isinstance(config, Mapping):
            raise ConfigurationError("Config must be a mapping!")

        self.base_url = base_url
        self.base_path = os.path.realpath(base_path)
        self.config = dict(config or {})

    @property
    def url_prefix(self) -> str:
        return urlsplit(self.base_url).path.rstrip("/")


class HttpHandler(Framework):
    """
    Dispatcher: routes a werkzeug Request through a Flask app built from the
    `SOURCES` blueprints. Errors raised by views propagate out of `handle`;
    HTTP errors (404, 405 ...) come back as ordinary responses.
    """

    def __init__(self, base_url: str, base_path: str, config=None):
        super().__init__(base_url, base_path, config)
        self.app = self._create_app()

    def _create_app(self):
        app = Flask(__name__, root_path=self.base_path)
        app.config.from_object(Config)
        app.config.from_mapping({k: v for k, v in self.config.items() if isinstance(k, str)})
        app.config["PROPAGATE_EXCEPTIONS"] = True

        register_blueprints(app, self.config.get(SOURCES))
        logger.debug("Dispatcher for %s serves %d blueprint(s)", self.base_url, len(app.blueprints))
        return app

    def _dispatch_environ(self, environ):
        """Environ with the base URL path moved to SCRIPT_NAME, or None if outside it."""
        prefix = self.url_prefix
        path = environ.get("PATH_INFO", "")
        if not prefix:
            return environ
        if not (path == prefix or path.startswith(prefix + "/")):
            return None
        environ = dict(environ)
        environ["SCRIPT_NAME"] = environ.get("SCRIPT_NAME", "") + prefix
        environ["PATH_INFO"] = path[len(prefix):]
        return environ

    def handle(self, request: Request) -> Response:
        environ = self._dispatch_environ(request.environ)
        if environ is None:
            return NotFound().get_response(request.environ)
        return Response.from_app(self.app, environ, buffered=True)

    def __call__(self, environ, start_response):
        response = self.handle(Request(environ))
        return response(environ, start_response)
