# daftlog/http.py
from werkzeug.wrappers import Response

FALLBACK_BODY = "There was an internal error"


def text_response(body, status=200, mimetype="text/plain"):
    return Response(body, status=status, mimetype=mimetype)


def fallback_response():
    # last resort when logging or rendering the error failed; says nothing about the cause
    return text_response(FALLBACK_BODY, status=500)
