import pytest
import requests
from unittest.mock import MagicMock, patch

from conftest import ADMIN, BASE_URL
from libregraph_api.v1 import LibreGraphClient, RequestEnvelope, RequestsDispatcher


class TestRequestsDispatcher:
    def test_send_forwards_everything(self, mock_session):
        dispatcher = RequestsDispatcher(mock_session)
        envelope = RequestEnvelope("POST", "https://h/graph/v1.0/users", {"Content-Type": "application/json"},
                                   ADMIN, '{"a": 1}', "req-9")
        resp = dispatcher.send(envelope)
        assert resp is mock_session.request.return_value
        mock_session.request.assert_called_once_with(
            method="POST",
            url="https://h/graph/v1.0/users",
            auth=ADMIN,
            headers={"Content-Type": "application/json", "X-Request-ID": "req-9"},
            data='{"a": 1}')

    def test_no_request_id_header_without_id(self, mock_session):
        RequestsDispatcher(mock_session).send(RequestEnvelope("GET", "https://h", {"A": "b"}))
        _, kwargs = mock_session.request.call_args
        assert kwargs["headers"] == {"A": "b"}

    def test_envelope_headers_not_mutated(self, mock_session):
        headers = {"A": "b"}
        RequestsDispatcher(mock_session).send(RequestEnvelope("GET", "https://h", headers, request_id="x"))
        assert headers == {"A": "b"}

    def test_transport_errors_propagate(self, mock_session):
        mock_session.request.side_effect = requests.exceptions.ConnectionError("down")
        with pytest.raises(requests.exceptions.ConnectionError):
            RequestsDispatcher(mock_session).send(RequestEnvelope("GET", "https://h"))
        assert mock_session.request.call_count == 1


class TestClient:
    def test_response_returned_untouched(self, mock_session):
        response = MagicMock()
        response.status_code = 500
        mock_session.request.return_value = response
        client = LibreGraphClient(BASE_URL, session=mock_session)
        assert client.drives.delete(ADMIN, "s1", request_id="abc") is response
        _, kwargs = mock_session.request.call_args
        assert kwargs["method"] == "DELETE"
        assert kwargs["url"] == BASE_URL + "/graph/v1.0/drives/s1"
        assert kwargs["headers"] == {"Content-Type": "application/json", "Purge": "T", "X-Request-ID": "abc"}
        assert kwargs["auth"] == ADMIN
        assert kwargs["data"] is None

    def test_default_session(self):
        with patch("libregraph_api.v1.client.requests.Session") as session_cls:
            client = LibreGraphClient(BASE_URL)
        assert isinstance(client.dispatcher, RequestsDispatcher)
        assert client.dispatcher.session is session_cls.return_value

    def test_custom_api_version(self, recorder):
        client = LibreGraphClient(BASE_URL + "/", dispatcher=recorder, api_version="beta")
        client.users.list(ADMIN)
        assert recorder.last.url == BASE_URL + "/graph/beta/users"

    def test_recorder_clear(self, client, recorder):
        client.users.list(ADMIN)
        recorder.clear()
        assert recorder.requests == []
        assert recorder.last is None
