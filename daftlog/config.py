import os
from collections.abc import Mapping

from .domain import HandlerConfig, RendererSpec
from .errors import ConfigurationError
from .renderers import ErrorRenderer, resolve_renderer

# Key of the handler config holding the error renderer chain.
ERROR_RENDERERS = "ERROR_RENDERERS"
# Key of the handler config holding the route sources of the dispatcher.
SOURCES = "SOURCES"


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-key")
    LOG_LEVEL = os.environ.get("DAFTLOG_LOG_LEVEL", "INFO")
    # dispatch errors must reach CatchingHttpHandler instead of Flask's own 500 page
    PROPAGATE_EXCEPTIONS = True


def load_handler_config(config) -> HandlerConfig:
    """
    Validate the error renderer section of a handler config.

    `config[ERROR_RENDERERS]` must be a non-empty mapping of registered
    renderer kind -> constructor argument list, e.g.

        {"ERROR_RENDERERS": {"plain_text": [], "json": [True]}}

    Raises ConfigurationError on the first problem found.
    """
    renderers = (config or {}).get(ERROR_RENDERERS)

    if renderers is None:
        raise ConfigurationError("Handlers are not configured")
    if not isinstance(renderers, Mapping):
        raise ConfigurationError("Handlers were not specified via an array!")
    if not renderers:
        raise ConfigurationError("No handlers were specified!")

    specs = []
    for kind, args in renderers.items():
        if not isinstance(kind, str):
            raise ConfigurationError("Handler config keys must be strings!")

        cls = resolve_renderer(kind)
        if cls is None or not issubclass(cls, ErrorRenderer):
            raise ConfigurationError(
                f"Handler config keys must refer to implementations of {ErrorRenderer.__name__}!"
            )
        if cls is ErrorRenderer:
            raise ConfigurationError(
                f"Handler config keys must refer to implementations of {ErrorRenderer.__name__}, not the interface!"
            )

        if not isinstance(args, (list, tuple)):
            raise ConfigurationError("Handler arguments must be specifed as an array!")

        specs.append(RendererSpec(kind, tuple(args)))

    return HandlerConfig(tuple(specs))
