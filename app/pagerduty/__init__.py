from .client import PagerDutyClient
from .models import OnCallAssignment, OnCallUser


__all__ = [
    "OnCallAssignment",
    "OnCallUser",
    "PagerDutyClient",
]
