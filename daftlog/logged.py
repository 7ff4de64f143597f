# daftlog/logged.py
import logging

from .framework import Framework, HttpHandler


class LoggerMixin:
    """Holds the logger handed to the constructor. Shared, never copied."""

    logger: logging.Logger

    def obtain_logger(self) -> logging.Logger:
        return self.logger


class LoggingFramework(LoggerMixin, Framework):
    def __init__(self, logger: logging.Logger, base_url: str, base_path: str, config=None):
        super().__init__(base_url, base_path, config)
        self.logger = logger


class LoggingHttpHandler(LoggerMixin, HttpHandler):
    def __init__(self, logger: logging.Logger, base_url: str, base_path: str, config=None):
        super().__init__(base_url, base_path, config)
        self.logger = logger
