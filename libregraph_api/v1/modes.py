import enum


class DeleteMode(enum.Enum):
    """How ``DELETE drives/<id>`` is interpreted by the server."""
    SOFT = 'soft'    # disable, can be restored
    PURGE = 'purge'  # terminal


class SpaceUpdateKind(enum.Enum):
    UPDATE = 'update'
    RESTORE = 'restore'
