"""Error types surfaced to callers of the proxy.

Every failure in the request path is raised as a ``ProxyError`` subclass and
turned into a plain-text response by :func:`handle_proxy_error`. Anything not
listed here is an upstream status and is passed through untouched.
"""

from flask import Response


class ConfigurationError(Exception):
    """Raised at startup when required settings are missing or invalid."""


class ProxyError(Exception):
    status_code = 500
    message = "oops"


class BadRequest(ProxyError):
    """The upstream request could not be built (e.g. malformed URL)."""

    status_code = 400
    message = ""


class NotFound(ProxyError):
    """The upstream API could not be reached.

    Transport failures are reported as 404 for compatibility with existing
    clients.
    """

    status_code = 404
    message = "Task not found"


class NotAuthorized(ProxyError):
    """The upstream API rejected the configured API key."""

    status_code = 401
    message = "Invalid API key"


class InternalError(ProxyError):
    status_code = 500
    message = "oops"

    def __init__(self, cause: Exception):
        super().__init__(str(cause))
        self.cause = cause


def handle_proxy_error(err: ProxyError) -> Response:
    return Response(err.message, status=err.status_code, mimetype="text/plain")
