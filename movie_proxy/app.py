from typing import Optional

import requests
from flask import Flask, Response, jsonify, request
from flask_cors import CORS

from movie_proxy.config import Settings
from movie_proxy.errors import ProxyError, handle_proxy_error
from movie_proxy.proxy import MovieProxy, UpstreamResponse, last_path_segment

PATH_PREFIX = "/v1/movies"


def _passthrough(upstream: UpstreamResponse) -> Response:
    response = Response(upstream.body, status=upstream.status)
    if upstream.content_type:
        response.headers["Content-Type"] = upstream.content_type
    else:
        # no Flask default when upstream sent none
        del response.headers["Content-Type"]
    return response


def create_app(settings: Settings, session: Optional[requests.Session] = None) -> Flask:
    """Create the proxy application around an injected configuration."""
    app = Flask(__name__)
    CORS(app, origins=[settings.frontend_origin])

    proxy = MovieProxy(settings, session=session)
    app.extensions["movie_proxy"] = proxy
    app.register_error_handler(ProxyError, handle_proxy_error)

    @app.route("/", methods=["GET"])
    def health_check():
        return jsonify({"status": "proxy-running"}), 200

    @app.route(PATH_PREFIX, methods=["GET"])
    def list_movies_discover():
        # only the first value of a repeated parameter is forwarded
        return _passthrough(proxy.discover(request.args.items()))

    @app.route(PATH_PREFIX + "/<movie_id>", methods=["GET"])
    def get_movie(movie_id):
        # the id is the final path segment, which this rule binds to movie_id
        return _passthrough(proxy.get_movie(last_path_segment(request.path)))

    return app
