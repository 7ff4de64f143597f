import traceback
from typing import List, Tuple


def error_location(error: BaseException) -> Tuple[str, int]:
    """File and line of the innermost frame, i.e. where `error` was raised."""
    tb = error.__traceback__
    if tb is None:
        return "unknown", 0
    while tb.tb_next is not None:
        tb = tb.tb_next
    return tb.tb_frame.f_code.co_filename, tb.tb_lineno


def describe_error(error: BaseException) -> str:
    """
    One-line summary used both for the log entry and the plain text page:
    "RuntimeError: foo in file /srv/app/views.py on line 12"
    """
    filename, lineno = error_location(error)
    return f"{type(error).__name__}: {error} in file {filename} on line {lineno}"


def error_trace(error: BaseException, limit=None) -> List[Tuple[str, int, str]]:
    # (file, line, function), outermost first
    frames = traceback.extract_tb(error.__traceback__, limit=limit)
    return [(f.filename, f.lineno, f.name) for f in frames]
