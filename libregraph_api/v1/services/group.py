from ..payloads import prepare_group_payload
from .base import BaseService


class GroupService(BaseService):
    base_path = 'groups'

    def create(self, credentials, display_name, request_id=''):
        path = self.base_path
        method = 'post'
        body = prepare_group_payload(display_name)
        return self.execute_request(method, path, credentials, request_id, body=body)

    def update(self, credentials, group_id, display_name, request_id=''):
        path = f'{self.base_path}/{group_id}'
        method = 'patch'
        body = prepare_group_payload(display_name)
        return self.execute_request(method, path, credentials, request_id, body=body)

    def list(self, credentials, request_id='', query_params=None):
        path = self.base_path
        method = 'get'
        return self.execute_request(method, path, credentials, request_id, query_params=query_params)

    def get(self, credentials, group_id, request_id='', query_params=None):
        path = f'{self.base_path}/{group_id}'
        method = 'get'
        return self.execute_request(method, path, credentials, request_id, query_params=query_params)

    def delete(self, credentials, group_id, request_id=''):
        path = f'{self.base_path}/{group_id}'
        method = 'delete'
        return self.execute_request(method, path, credentials, request_id)
