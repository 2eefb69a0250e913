from ..payloads import prepare_change_password_payload
from .base import BaseService


class PasswordService(BaseService):
    def change(self, credentials, current_password, new_password, request_id=''):
        path = 'changePassword'
        method = 'post'
        body = prepare_change_password_payload(current_password, new_password)
        return self.execute_request(method, path, credentials, request_id, body=body)
