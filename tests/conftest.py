from typing import Callable, Iterator, Optional
from unittest.mock import MagicMock

import pytest
import requests
from flask import Flask
from flask.testing import FlaskClient
from requests.structures import CaseInsensitiveDict

from movie_proxy import Settings, create_app

UPSTREAM_BASE = "http://upstream.test/3/"
API_KEY = "test-key"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        api_key=API_KEY,
        api_base=UPSTREAM_BASE,
        frontend_origin="http://frontend.test",
    )


@pytest.fixture
def session() -> Iterator[requests.Session]:
    """Real session whose ``send`` never touches the network."""
    session = requests.Session()
    session.send = MagicMock()
    yield session
    session.close()


@pytest.fixture
def app(settings: Settings, session: requests.Session) -> Flask:
    app = create_app(settings, session=session)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture
def upstream_response() -> Callable[..., MagicMock]:
    """Factory for upstream responses returned by ``session.send``."""

    def _make(
        status: int = 200,
        body: bytes = b"",
        content_type: Optional[str] = "application/json;charset=utf-8",
    ) -> MagicMock:
        response = MagicMock(spec=requests.Response)
        response.status_code = status
        response.content = body
        response.headers = CaseInsensitiveDict()
        if content_type:
            response.headers["Content-Type"] = content_type
        response.__enter__.return_value = response
        response.__exit__.return_value = False
        return response

    return _make
