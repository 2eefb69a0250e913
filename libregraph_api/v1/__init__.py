from .client import LibreGraphClient
from .dispatch import RecordingDispatcher, RequestEnvelope, RequestsDispatcher
from .modes import DeleteMode, SpaceUpdateKind

__all__ = [
    "LibreGraphClient",
    "RecordingDispatcher",
    "RequestEnvelope",
    "RequestsDispatcher",
    "DeleteMode",
    "SpaceUpdateKind",
]
