from .base_factory import BaseFactory
from .group_factory import GroupServicesFactory

__all__ = [
    "BaseFactory",
    "GroupServicesFactory",
]
