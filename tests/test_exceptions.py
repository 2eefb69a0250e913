import json

import pytest
from unittest.mock import MagicMock

from libregraph_api.v1.exceptions import GraphClientError, GraphServerError, check_response


def make_response(status_code, content):
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    return response


class TestCheckResponse:
    def test_success_returned(self):
        response = make_response(201, b'{}')
        assert check_response(response) is response

    def test_client_error(self):
        body = json.dumps({"error": {"code": "itemNotFound", "message": "no such user"}}).encode()
        with pytest.raises(GraphClientError) as info:
            check_response(make_response(404, body))
        err = info.value
        assert err.is_not_found
        assert not err.is_forbidden
        assert err.error_code == "itemNotFound"
        assert err.error_message == "no such user"
        assert str(err) == "404: itemNotFound: no such user"

    def test_client_error_with_plain_body(self):
        with pytest.raises(GraphClientError) as info:
            check_response(make_response(409, b"conflict"))
        assert info.value.is_conflict
        assert info.value.error_code == "unknown"
        assert info.value.error_message == "conflict"

    def test_server_error(self):
        body = b'{"error": {"code": "generalException", "message": "boom"}}'
        with pytest.raises(GraphServerError) as info:
            check_response(make_response(500, body))
        assert info.value.status_code == 500
        assert info.value.error_code == "generalException"

    def test_predicates(self):
        assert GraphClientError(400).is_bad_request
        assert GraphClientError(401).is_unauthorized
        assert GraphClientError(403).is_forbidden
        assert "GraphClientError" in repr(GraphClientError(400))

    def test_client_error_with_string_error_value(self):
        body = b'{"error": "invalid_token", "error_description": "token expired"}'
        with pytest.raises(GraphClientError) as info:
            check_response(make_response(401, body))
        assert info.value.is_unauthorized
        assert info.value.error_code == "invalid_token"
        assert info.value.error_message == "token expired"

    def test_client_error_with_bare_string_error_value(self):
        with pytest.raises(GraphClientError) as info:
            check_response(make_response(401, b'{"error": "invalid_token"}'))
        assert info.value.error_code == "invalid_token"
        assert info.value.error_message == '{"error": "invalid_token"}'

    def test_server_error_with_string_error_value(self):
        with pytest.raises(GraphServerError) as info:
            check_response(make_response(502, b'{"error": "bad gateway"}'))
        assert info.value.status_code == 502
        assert info.value.error_code == "bad gateway"

    def test_client_error_built_from_non_dict_error(self):
        err = GraphClientError(400, {"error": "oops"})
        assert err.error_code == ""
        assert err.error_message == ""
