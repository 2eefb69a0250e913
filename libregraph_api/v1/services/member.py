from typing import Iterable

from ..references import member_reference, members_bind
from .base import BaseService


class MemberService(BaseService):
    """
    Membership of the group in ``prefix`` (``groups/<id>``).

    ``add`` links a single user through ``members/$ref``; ``bind`` sets several
    at once through ``members@odata.bind``. They hit different endpoints and
    are not interchangeable.
    """

    def add(self, credentials, user_id, request_id=''):
        path = 'members/$ref'
        method = 'post'
        body = member_reference(self.client.base_url, user_id, self.client.api_version)
        return self.execute_request(method, path, credentials, request_id, body=body)

    def bind(self, credentials, user_ids: Iterable[str], request_id=''):
        path = 'users'
        method = 'post'
        body = members_bind(self.client.base_url, user_ids, self.client.api_version)
        return self.execute_request(method, path, credentials, request_id, body=body)

    def remove(self, credentials, user_id, request_id=''):
        path = f'members/{user_id}/$ref'
        method = 'delete'
        return self.execute_request(method, path, credentials, request_id)

    def list(self, credentials, request_id='', query_params=None):
        path = 'members'
        method = 'get'
        return self.execute_request(method, path, credentials, request_id, query_params=query_params)
