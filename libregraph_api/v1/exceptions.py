import json


def _error_data(body):
    if isinstance(body, bytes):
        body = body.decode('utf-8', errors='replace')
    try:
        data = json.loads(body)
    except (TypeError, ValueError):
        return {'error': {'message': body or '', 'code': 'unknown'}}
    if not isinstance(data, dict):
        return {'error': {'message': body, 'code': 'unknown'}}
    error = data.get('error')
    if error is not None and not isinstance(error, dict):
        # oauth and proxy style: {"error": "invalid_token", "error_description": ...}
        return {'error': {'code': str(error), 'message': data.get('error_description') or body}}
    return data


def _error_entry(data):
    error = (data or {}).get('error')
    return error if isinstance(error, dict) else {}


class GraphClientError(Exception):

    def __init__(self, status_code: int = 0, data: dict | None = None, error_message: str | None = None):
        self.status_code = status_code
        error = _error_entry(data)
        self.error_code = error.get('code', '')
        self.error_message = error_message or error.get('message', '')
        super(GraphClientError, self).__init__('{}: {}: {}'.format(
            status_code,
            self.error_code,
            self.error_message))

    @property
    def is_bad_request(self):
        return self.status_code == 400

    @property
    def is_unauthorized(self):
        return self.status_code == 401

    @property
    def is_forbidden(self):
        return self.status_code == 403

    @property
    def is_not_found(self):
        return self.status_code == 404

    @property
    def is_conflict(self):
        return self.status_code == 409

    def __repr__(self):
        return '<{0}>: {1} {2} ({3})'.format(
            'GraphClientError', self.status_code, self.error_code, self.error_message)


class GraphServerError(Exception):

    def __init__(self, status_code, body):
        super(GraphServerError, self).__init__(
            '{}: {}'.format(status_code, body))
        self.status_code = status_code
        error = _error_entry(_error_data(body))
        self.error_code = error.get('code', '')
        self.error_message = body


def check_response(response):
    """
    Raise for an error response, return it otherwise.

    Operations never call this themselves; it is for callers that want an
    exception instead of inspecting ``status_code``.
    """
    status_code = response.status_code
    if status_code < 400:
        return response
    if status_code < 500:
        raise GraphClientError(status_code, _error_data(response.content))
    raise GraphServerError(status_code, response.content)
