import logging
import os

from flask.logging import default_handler

from .catching import CatchingHttpHandler
from .config import ERROR_RENDERERS, Config
from .errors import ConfigurationError, DaftError
from .framework import Framework, HttpHandler
from .logged import LoggingFramework, LoggingHttpHandler
from .renderers import ErrorRenderer, ErrorRendererChain, register_renderer


def create_app(config=None, logger=None, base_url="http://localhost/", base_path=None):
    """Build a CatchingHttpHandler with plain text error pages by default."""
    config = dict(config or {})
    config.setdefault(ERROR_RENDERERS, {"plain_text": []})

    if logger is None:
        logger = logging.getLogger(__name__)
        if not logger.handlers:
            # first call configures the shared logger; later calls reuse it as is
            logger.addHandler(default_handler)
            logger.setLevel(config.get("LOG_LEVEL", Config.LOG_LEVEL))
            logger.propagate = False

    return CatchingHttpHandler(logger, base_url, base_path or os.getcwd(), config)
