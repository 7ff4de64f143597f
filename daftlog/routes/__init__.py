"""Blueprint registration for the dispatcher.

Route sources come from the handler config (`SOURCES`) as Blueprint objects
or "package.module:blueprint" import strings.
"""

from flask import Blueprint
from werkzeug.utils import ImportStringError, import_string

from ..errors import ConfigurationError


def resolve_sources(sources):
    if sources is None:
        return []
    if not isinstance(sources, (list, tuple)):
        raise ConfigurationError("Route sources must be given as a list!")

    blueprints = []
    for source in sources:
        if isinstance(source, str):
            try:
                source = import_string(source)
            except ImportStringError as e:
                raise ConfigurationError(f"Route source {source!r} could not be imported!") from e
        if not isinstance(source, Blueprint):
            raise ConfigurationError("Route sources must be blueprints!")
        blueprints.append(source)
    return blueprints


def register_blueprints(app, sources):
    for bp in resolve_sources(sources):
        app.register_blueprint(bp)
