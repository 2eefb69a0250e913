from .base import BaseService
from .drive import DriveListService, DriveService
from .group import GroupService
from .member import MemberService
from .password import PasswordService
from .user import UserService

__all__ = [
    "BaseService",
    "DriveListService",
    "DriveService",
    "GroupService",
    "MemberService",
    "PasswordService",
    "UserService",
]
