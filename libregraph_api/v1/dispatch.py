import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .consts import REQUEST_ID_HEADER

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestEnvelope:
    """Everything a dispatcher needs to fire one request. Built per call."""
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    credentials: Any = None
    body: Optional[str] = None
    request_id: str = ''


class RequestsDispatcher(object):
    """
    Sends envelopes through a ``requests`` session.

    Credentials are handed to ``requests`` as ``auth`` untouched, so a
    ``(user, password)`` tuple means basic auth. Transport errors and
    non-2xx responses are not handled here.
    """

    def __init__(self, session):
        self.session = session

    def send(self, envelope: RequestEnvelope):
        headers = dict(envelope.headers)
        if envelope.request_id:
            headers[REQUEST_ID_HEADER] = envelope.request_id
        logger.debug('dispatching {} {} (request id: {})'.format(
            envelope.method, envelope.url, envelope.request_id or '-'))
        return self.session.request(
            method=envelope.method,
            url=envelope.url,
            auth=envelope.credentials,
            headers=headers,
            data=envelope.body)


class RecordingDispatcher(object):
    """
    Records envelopes instead of sending them.

    Useful for dry runs and for asserting on the exact requests an operation
    produces. ``send`` returns the envelope itself.
    """

    def __init__(self):
        self.requests: List[RequestEnvelope] = []

    def send(self, envelope: RequestEnvelope):
        logger.debug('recording {} {}'.format(envelope.method, envelope.url))
        self.requests.append(envelope)
        return envelope

    @property
    def last(self) -> Optional[RequestEnvelope]:
        return self.requests[-1] if self.requests else None

    def clear(self):
        self.requests = []
