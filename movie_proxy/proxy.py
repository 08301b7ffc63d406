"""Forwarding of movie requests to the upstream metadata API."""

import logging
from typing import Iterable, NamedTuple, Optional, Tuple
from urllib.parse import quote, urlencode

import requests

from movie_proxy.config import Settings
from movie_proxy.errors import BadRequest, InternalError, NotAuthorized, NotFound

logger = logging.getLogger("movie-proxy")


class UpstreamResponse(NamedTuple):
    status: int
    body: bytes
    content_type: Optional[str] = None


def last_path_segment(path: str) -> str:
    """Return the final slash-delimited segment of ``path``.

    ``/v1/movies/42`` gives ``42``; ``/v1/movies`` gives ``movies``.
    """
    return path.split("/")[-1]


class MovieProxy:
    """Builds upstream URLs and forwards requests, injecting the API key."""

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.session = session or requests.Session()

    def _url(self, endpoint: str, params: Iterable[Tuple[str, str]] = ()) -> str:
        query = urlencode([("api_key", self.settings.api_key), *params])
        return f"{self.settings.api_base.rstrip('/')}/{endpoint}?{query}"

    def discover_url(self, params: Iterable[Tuple[str, str]]) -> str:
        """Discovery URL with every (name, first value) pair appended after the key."""
        return self._url("discover/movie", params)

    def movie_url(self, movie_id: str) -> str:
        # the id stays one path segment; "?" or "/" in it must not reach the query
        return self._url(f"movie/{quote(movie_id, safe='')}")

    def forward(self, method: str, url: str) -> UpstreamResponse:
        """Issue ``method`` against ``url`` and classify the outcome.

        Raises a ``ProxyError`` for everything except a non-401 upstream
        status, which is returned as-is.
        """
        endpoint = url.split("?", 1)[0]

        try:
            prepared = self.session.prepare_request(requests.Request(method, url))
            # proxy and CA bundle variables from the environment
            send_kwargs = self.session.merge_environment_settings(
                prepared.url, {}, True, None, None
            )
        except (requests.RequestException, ValueError):
            raise BadRequest()

        try:
            response = self.session.send(
                prepared, timeout=self.settings.upstream_timeout, **send_kwargs
            )
        except requests.RequestException as e:
            logger.warning(
                "Upstream request to %s failed: %s", endpoint, type(e).__name__
            )
            raise NotFound()

        with response:
            if response.status_code == 401:
                logger.warning("Upstream rejected the API key for %s", endpoint)
                raise NotAuthorized()

            try:
                body = response.content
            except (requests.RequestException, OSError) as e:
                logger.exception("Failed to read upstream body from %s", endpoint)
                raise InternalError(e)

            return UpstreamResponse(
                status=response.status_code,
                body=body,
                content_type=response.headers.get("Content-Type"),
            )

    def discover(self, params: Iterable[Tuple[str, str]]) -> UpstreamResponse:
        return self.forward("GET", self.discover_url(params))

    def get_movie(self, movie_id: str) -> UpstreamResponse:
        return self.forward("GET", self.movie_url(movie_id))
