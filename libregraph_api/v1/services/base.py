import json
import logging
import urllib.parse

from ..consts import DEFAULT_HEADERS
from ..dispatch import RequestEnvelope
from ..endpoints import resolve

logger = logging.getLogger(__name__)


class BaseService(object):
    def __init__(self, client, prefix):
        self.client = client
        self.prefix = prefix

    def build_url(self, path, suffix=None):
        if path.startswith('/'):
            path = path.lstrip('/')
        resource_path = '/'.join(s for s in [self.prefix, path] if s)
        return resolve(self.client.base_url, resource_path, suffix=suffix,
                       api_version=self.client.api_version)

    @staticmethod
    def dump_body(body):
        if body is None or isinstance(body, (str, bytes)):
            return body
        return json.dumps(body)

    def execute_request(self, method, path, credentials=None, request_id='', query_params=None,
                        headers=None, body=None, suffix=None):
        full_url = self.build_url(path, suffix=suffix)
        if query_params:
            querystring = urllib.parse.urlencode(query_params)
            full_url += ('&' if '?' in full_url else '?') + querystring
        default_headers = dict(DEFAULT_HEADERS)
        if headers:
            default_headers.update(headers)
        logger.info('{}: {}'.format(method.upper(), full_url))
        envelope = RequestEnvelope(
            method=method.upper(),
            url=full_url,
            headers=default_headers,
            credentials=credentials,
            body=self.dump_body(body),
            request_id=request_id or '')
        return self.client.dispatcher.send(envelope)
