import pytest
from unittest.mock import MagicMock

from libregraph_api.v1 import LibreGraphClient, RecordingDispatcher

BASE_URL = 'https://ocis.example.test'
ADMIN = ('admin', 'admin')


@pytest.fixture
def recorder():
    return RecordingDispatcher()


@pytest.fixture
def client(recorder):
    return LibreGraphClient(BASE_URL, dispatcher=recorder)


@pytest.fixture
def mock_session():
    session = MagicMock()
    response = MagicMock()
    response.status_code = 200
    session.request.return_value = response
    return session
