"""Small blueprint served by run.py; handy to see the error pages."""

from flask import Blueprint

demo = Blueprint("demo", __name__)


@demo.route("/")
def index():
    return "daftlog is running"


@demo.route("/throws/<message>")
def throws(message):
    raise RuntimeError(message)


@demo.route("/no-response")
def no_response():
    # Flask refuses views that return nothing
    return None
