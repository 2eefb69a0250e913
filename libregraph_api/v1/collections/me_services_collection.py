from ..services import DriveListService, PasswordService
from .services_collection import ServicesCollection


class MeServicesCollection(ServicesCollection):
    """Services acting on behalf of the authenticated user."""
    def __init__(self, client, prefix='me'):
        super().__init__(client, prefix)
        self.drives = DriveListService(self.client, self.prefix)
        self.password = PasswordService(self.client, self.prefix)
