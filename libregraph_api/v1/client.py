# -*- coding: utf-8 -*-
import requests

from .collections import MeServicesCollection
from .consts import GRAPH_API_VERSION
from .dispatch import RequestsDispatcher
from .factories import GroupServicesFactory
from .services import DriveService, GroupService, UserService


class LibreGraphClient(object):
    """
    Entry point to the Graph API of a server at ``base_url``.

    Requests go through ``dispatcher`` (anything with a ``send(envelope)``
    method). Without one, a ``RequestsDispatcher`` over ``session`` is used,
    and a fresh ``requests.Session`` when no session is given either.
    """

    def __init__(self, base_url, session=None, dispatcher=None, api_version=GRAPH_API_VERSION):
        self.base_url = base_url
        self.api_version = api_version
        if dispatcher is None:
            dispatcher = RequestsDispatcher(session if session is not None else requests.Session())
        self.dispatcher = dispatcher

        self.users = UserService(self, '')
        self.groups = GroupService(self, '')
        self.group = GroupServicesFactory(self)
        self.drives = DriveService(self, '')
        self.me = MeServicesCollection(self, 'me')
