from .services_collection import ServicesCollection
from .group_services_collection import GroupServicesCollection
from .me_services_collection import MeServicesCollection

__all__ = [
    "ServicesCollection",
    "GroupServicesCollection",
    "MeServicesCollection",
]
