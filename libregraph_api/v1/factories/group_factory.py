from ..collections import GroupServicesCollection
from .base_factory import BaseFactory


class GroupServicesFactory(BaseFactory):
    def __call__(self, group_id) -> GroupServicesCollection:
        return GroupServicesCollection(self.client, 'groups/' + group_id)
