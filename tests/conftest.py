"""
pytest configuration and fixtures.
"""

import logging

import pytest
from flask import Blueprint
from werkzeug.test import EnvironBuilder

from daftlog import CatchingHttpHandler

BASE_URL = "https://example.com/"

routes = Blueprint("routes", __name__)


@routes.route("/")
def index():
    return "hello"


@routes.route("/teapot")
def teapot():
    return "short and stout", 418, {"X-Kind": "teapot"}


@routes.route("/loggedin")
def logged_in():
    return None


@routes.route("/throws/runtime-exception/<message>")
def throws_runtime_exception(message):
    raise RuntimeError(message)


class ThrowingLogger(logging.Logger):
    """Logger whose `throw_on`-th record blows up instead of being handled."""

    def __init__(self, throw_on: int, name: str = "testing"):
        super().__init__(name)
        self.throw_on = throw_on
        self.calls = 0
        self.addHandler(logging.NullHandler())

    def handle(self, record):
        self.calls += 1
        if self.calls == self.throw_on:
            raise RuntimeError("logger is broken")
        super().handle(record)


def make_request(path="/", method="GET", base_url=BASE_URL):
    return EnvironBuilder(path=path, method=method, base_url=base_url).get_request()


@pytest.fixture
def base_path(tmp_path) -> str:
    return str(tmp_path)


@pytest.fixture
def logger() -> logging.Logger:
    # propagates to the root logger so caplog sees the records
    return logging.getLogger("tests.daftlog")


@pytest.fixture
def handler_config() -> dict:
    return {
        "SOURCES": [routes],
        "ERROR_RENDERERS": {"plain_text": []},
    }


@pytest.fixture
def make_handler(base_path, handler_config):
    def factory(logger, config=None, base_url=BASE_URL):
        return CatchingHttpHandler(logger, base_url, base_path, config or handler_config)
    return factory


@pytest.fixture
def handler(make_handler, logger) -> CatchingHttpHandler:
    return make_handler(logger)
