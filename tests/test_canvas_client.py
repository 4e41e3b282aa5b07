"""Tests for the Canvas transport adapter."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from gradecheck.data.adapters.canvas_client import CanvasClient
from gradecheck.engine.errors import ErrorKind, TransportError

URL = "https://school.test/api/v1/users/self"
HEADERS = {"Authorization": "Bearer secret"}


def _mock_session(status_code=200, payload=None, json_error=None):
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = status_code < 400
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    session = MagicMock()
    session.get.return_value = resp
    return session


class TestCanvasClient:
    def test_returns_decoded_json(self):
        session = _mock_session(payload={"id": 1, "name": "Alice"})
        client = CanvasClient(session=session)

        assert client.get(URL, HEADERS) == {"id": 1, "name": "Alice"}

    def test_sends_auth_header_and_timeout(self):
        session = _mock_session(payload={})
        CanvasClient(timeout=12.5, session=session).get(URL, HEADERS)

        _, kwargs = session.get.call_args
        assert session.get.call_args.args[0] == URL
        assert kwargs["headers"]["Authorization"] == "Bearer secret"
        assert kwargs["headers"]["Accept"] == "application/json"
        assert kwargs["timeout"] == 12.5

    def test_error_status_still_returns_body(self):
        body = {"errors": [{"message": "Invalid access token."}]}
        session = _mock_session(status_code=401, payload=body)

        assert CanvasClient(session=session).get(URL, HEADERS) == body

    def test_connection_error_raises_transport_error(self):
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("Network error")

        with pytest.raises(TransportError) as excinfo:
            CanvasClient(session=session).get(URL, HEADERS)
        assert excinfo.value.kind is ErrorKind.TRANSPORT
        assert isinstance(excinfo.value.__cause__, requests.ConnectionError)

    def test_timeout_raises_transport_error(self):
        session = MagicMock()
        session.get.side_effect = requests.Timeout("read timed out")

        with pytest.raises(TransportError):
            CanvasClient(session=session).get(URL, HEADERS)

    def test_non_json_body_raises_transport_error(self):
        session = _mock_session(status_code=502, json_error=ValueError("Expecting value"))

        with pytest.raises(TransportError, match="non-JSON"):
            CanvasClient(session=session).get(URL, HEADERS)

    def test_context_manager_closes_session(self):
        session = _mock_session(payload={})
        with CanvasClient(session=session) as client:
            client.get(URL, HEADERS)
        session.close.assert_called_once()
