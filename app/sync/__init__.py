from .group_updater import GroupMembershipUpdater, GroupUpdateResult
from .orchestrator import OnCallSync, SyncResult, format_oncall_message


__all__ = [
    "GroupMembershipUpdater",
    "GroupUpdateResult",
    "OnCallSync",
    "SyncResult",
    "format_oncall_message",
]
