from ..services import MemberService
from .services_collection import ServicesCollection


class GroupServicesCollection(ServicesCollection):
    """Wrap the services of a single group."""
    def __init__(self, client, prefix):
        super().__init__(client, prefix)
        self.members = MemberService(self.client, self.prefix)
