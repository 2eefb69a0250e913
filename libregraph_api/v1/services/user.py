from ..payloads import prepare_create_user_payload, prepare_patch_user_payload
from .base import BaseService


class UserService(BaseService):
    base_path = 'users'

    def create(self, credentials, user_name, password, email=None, display_name=None, request_id=''):
        path = self.base_path
        method = 'post'
        body = prepare_create_user_payload(user_name, password, email, display_name)
        return self.execute_request(method, path, credentials, request_id, body=body)

    def update(self, credentials, user_id, user_name=None, password=None, email=None, display_name=None,
               request_id=''):
        path = f'{self.base_path}/{user_id}'
        method = 'patch'
        body = prepare_patch_user_payload(user_name, password, email, display_name)
        return self.execute_request(method, path, credentials, request_id, body=body)

    def get(self, credentials, user_id, request_id='', query_params=None):
        path = f'{self.base_path}/{user_id}'
        method = 'get'
        return self.execute_request(method, path, credentials, request_id, query_params=query_params)

    def list(self, credentials, request_id='', query_params=None):
        path = self.base_path
        method = 'get'
        return self.execute_request(method, path, credentials, request_id, query_params=query_params)

    def delete(self, credentials, user_id, request_id=''):
        path = f'{self.base_path}/{user_id}'
        method = 'delete'
        return self.execute_request(method, path, credentials, request_id)
