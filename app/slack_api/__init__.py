from .client import SlackApiError, SlackClient
from .directory import DirectoryMatcher, DirectoryUser


__all__ = [
    "DirectoryMatcher",
    "DirectoryUser",
    "SlackApiError",
    "SlackClient",
]
