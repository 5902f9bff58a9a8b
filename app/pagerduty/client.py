from collections.abc import Iterable

import requests
from aws_lambda_powertools import Logger

from errors import OnCallLookupError

from .models import OnCallAssignment


logger = Logger(child=True)


class PagerDutyClient:
    PAGERDUTY_API_BASE = "https://api.pagerduty.com"

    def __init__(self, api_token: str, skip_schedules: Iterable[str] = (), timeout: float = 10):
        self._api_token = api_token
        self._skip_schedules = frozenset(skip_schedules)
        self._timeout = timeout

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Token token={self._api_token}",
            "Accept": "application/vnd.pagerduty+json;version=2",
        }

    def fetch_oncalls(self) -> list[OnCallAssignment]:
        """Fetch the first page of current on-call records. Unusable records are dropped."""
        response = requests.get(f"{self.PAGERDUTY_API_BASE}/oncalls", headers=self._headers(), timeout=self._timeout)
        response.raise_for_status()

        assignments = []
        for record in response.json().get("oncalls") or []:
            assignment = OnCallAssignment.from_pagerduty_payload(record)
            if assignment is not None:
                assignments.append(assignment)
        return assignments

    def get_oncall_users(self) -> list[str]:
        logger.info("Fetching on-call users from PagerDuty")

        try:
            assignments = self.fetch_oncalls()
        except (requests.RequestException, ValueError) as e:
            raise OnCallLookupError(f"Failed to get on-call users: {e}") from e

        unique_users: dict[str, str] = {}
        for assignment in assignments:
            if assignment.schedule_id in self._skip_schedules:
                continue
            unique_users[assignment.user.id] = assignment.user.display_name

        users = list(unique_users.values())
        logger.info("Found on-call users", extra={"users": users, "count": len(users)})
        return users
