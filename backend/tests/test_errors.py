"""Mapping of domain errors to HTTP responses"""

import asyncio
import json

import pytest
from starlette.requests import Request

from app.errors import (
    ForbiddenError,
    InvalidParameterError,
    NotAllowedError,
    NotFoundError,
    TournamentError,
    UnauthorizedError,
)
from app.main import tournament_error_handler


def make_request() -> Request:
    return Request({"type": "http", "method": "GET", "path": "/api/tournaments", "headers": [], "query_string": b""})


@pytest.mark.parametrize(
    "error_class,status_code",
    [
        (NotFoundError, 404),
        (InvalidParameterError, 400),
        (UnauthorizedError, 401),
        (ForbiddenError, 403),
        (NotAllowedError, 405),
        (TournamentError, 500),
    ],
)
def test_error_status_codes(error_class, status_code):
    response = asyncio.run(tournament_error_handler(make_request(), error_class("boom")))

    assert response.status_code == status_code
    assert json.loads(response.body) == {"detail": "boom"}


def test_only_unauthorized_carries_challenge():
    unauthorized = asyncio.run(tournament_error_handler(make_request(), UnauthorizedError("Unauthorized")))
    forbidden = asyncio.run(tournament_error_handler(make_request(), ForbiddenError("Forbidden")))

    assert unauthorized.headers["www-authenticate"] == 'Basic realm="Tournament"'
    assert "www-authenticate" not in forbidden.headers


def test_message_is_kept():
    error = NotAllowedError("Tournament is active.")
    assert error.message == "Tournament is active."
    assert str(error) == "Tournament is active."
