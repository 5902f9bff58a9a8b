class SyncError(Exception):
    """Fatal error that aborts the sync run."""


class OnCallLookupError(SyncError):
    pass


class NotificationError(SyncError):
    pass


class GroupUpdateError(SyncError):
    pass
