from ..consts import PURGE_HEADER, RESTORE_BODY, RESTORE_HEADER
from ..modes import DeleteMode, SpaceUpdateKind
from .base import BaseService


class DriveListService(BaseService):
    """Listing of spaces; the only drives route under ``me``."""
    base_path = 'drives'

    def list(self, credentials, url_arguments='', request_id='', query_params=None, headers=None):
        path = self.base_path
        method = 'get'
        return self.execute_request(method, path, credentials, request_id, query_params=query_params,
                                    headers=headers, suffix=url_arguments)


class DriveService(DriveListService):
    """
    All storage spaces.

    A space is active, disabled or purged. ``disable`` and ``delete`` send the
    same ``DELETE drives/<id>`` and differ only by the ``Purge`` header;
    ``restore`` brings a disabled space back, nothing brings back a purged one.
    """

    def create(self, credentials, body, request_id='', headers=None):
        path = self.base_path
        method = 'post'
        return self.execute_request(method, path, credentials, request_id, headers=headers, body=body)

    def get(self, credentials, space_id, url_arguments='', request_id='', query_params=None, headers=None):
        path = f'{self.base_path}/{space_id}'
        method = 'get'
        return self.execute_request(method, path, credentials, request_id, query_params=query_params,
                                    headers=headers, suffix=url_arguments)

    def update(self, credentials, space_id, body=None, kind=SpaceUpdateKind.UPDATE, request_id='', headers=None):
        kind = SpaceUpdateKind(kind)
        path = f'{self.base_path}/{space_id}'
        method = 'patch'
        if kind is SpaceUpdateKind.RESTORE:
            if body is not None:
                raise ValueError("a restore request carries no body of its own")
            headers = dict(headers or {}, **RESTORE_HEADER)
            body = RESTORE_BODY
        return self.execute_request(method, path, credentials, request_id, headers=headers, body=body)

    def restore(self, credentials, space_id, request_id=''):
        return self.update(credentials, space_id, kind=SpaceUpdateKind.RESTORE, request_id=request_id)

    def remove(self, credentials, space_id, mode=DeleteMode.SOFT, request_id=''):
        mode = DeleteMode(mode)
        path = f'{self.base_path}/{space_id}'
        method = 'delete'
        headers = dict(PURGE_HEADER) if mode is DeleteMode.PURGE else None
        return self.execute_request(method, path, credentials, request_id, headers=headers)

    def disable(self, credentials, space_id, request_id=''):
        return self.remove(credentials, space_id, DeleteMode.SOFT, request_id)

    def delete(self, credentials, space_id, request_id=''):
        return self.remove(credentials, space_id, DeleteMode.PURGE, request_id)
