import logging

from werkzeug.wrappers import Request, Response

from .config import load_handler_config
from .errors import describe_error
from .http import fallback_response, text_response
from .logged import LoggingHttpHandler
from .renderers import ErrorRendererChain


class CatchingHttpHandler(LoggingHttpHandler):
    """
    LoggingHttpHandler that never lets a dispatch error escape `handle`.

    A failed dispatch is logged, then rendered into a 500 response by the
    `ERROR_RENDERERS` chain. If logging or rendering fails, the response is a
    fixed 500 "There was an internal error" and the original error is dropped.
    """

    def __init__(self, logger: logging.Logger, base_url: str, base_path: str, config=None):
        super().__init__(logger, base_url, base_path, config)
        self.handler_config = load_handler_config(self.config)
        self.renderers = ErrorRendererChain.from_config(self.handler_config)

    def handle(self, request: Request) -> Response:
        try:
            return super().handle(request)
        except Exception as e:
            error = e

        try:
            self.logger.log(
                logging.ERROR,
                describe_error(error),
                exc_info=error,
                extra={"exception": error},
            )
        except Exception:
            return fallback_response()

        try:
            body, mimetype = self.renderers.render(error, request)
        except Exception:
            return fallback_response()
        return text_response(body, status=500, mimetype=mimetype)
