from typing import Optional

from aws_lambda_powertools import Logger
from pydantic import BaseModel

from .client import SlackApiError, SlackClient


logger = Logger(child=True)


class DirectoryUser(BaseModel):
    id: str
    name: str = ""
    real_name: str = ""
    profile_real_name: str = ""

    @classmethod
    def from_slack_member(cls, member: dict) -> "DirectoryUser":
        profile = member.get("profile") or {}
        return cls(
            id=member.get("id", ""),
            name=member.get("name") or "",
            real_name=member.get("real_name") or "",
            profile_real_name=profile.get("real_name") or "",
        )

    def matches(self, display_name: str) -> bool:
        # Exact, case-sensitive comparison against each name field.
        return display_name in (self.real_name, self.name, self.profile_real_name)


class DirectoryMatcher:
    """Resolves on-call display names to Slack user IDs.

    The full directory is listed on every lookup; nothing is cached between calls.
    """

    def __init__(self, slack_client: SlackClient):
        self._slack_client = slack_client

    def find_user_id(self, display_name: str) -> Optional[str]:
        try:
            members = self._slack_client.list_users()
        except SlackApiError as e:
            logger.warning("Failed to get Slack ID", extra={"user": display_name, "error": str(e)})
            return None

        for member in members:
            user = DirectoryUser.from_slack_member(member)
            if user.matches(display_name):
                return user.id

        return None
