from typing import Literal, Optional

from aws_lambda_powertools import Logger
from pydantic import BaseModel, Field

from errors import NotificationError, SyncError
from pagerduty import PagerDutyClient
from slack_api import SlackApiError, SlackClient

from .group_updater import GroupMembershipUpdater


logger = Logger(child=True)


class SyncResult(BaseModel):
    status: Literal["no_oncall", "no_matches", "updated", "failed"]
    oncall_users: list[str] = Field(default_factory=list)
    resolved_user_ids: list[str] = Field(default_factory=list)
    unresolved_users: list[str] = Field(default_factory=list)
    previous_members: list[str] = Field(default_factory=list)
    current_members: list[str] = Field(default_factory=list)
    error: Optional[str] = None


def format_oncall_message(users: list[str]) -> str:
    bullets = "\n• ".join(users)
    return f":rotating_light: On-Call Update :rotating_light:\nCurrent on-call engineers:\n• {bullets}"


class OnCallSync:
    def __init__(
        self,
        pagerduty_client: PagerDutyClient,
        slack_client: SlackClient,
        updater: GroupMembershipUpdater,
        channel_id: str,
    ):
        self._pagerduty_client = pagerduty_client
        self._slack_client = slack_client
        self._updater = updater
        self._channel_id = channel_id

    def notify(self, users: list[str]) -> None:
        try:
            self._slack_client.post_message(self._channel_id, format_oncall_message(users))
        except SlackApiError as e:
            raise NotificationError(f"Failed to post on-call update: {e}") from e

    def run(self) -> SyncResult:
        """Run the sync pipeline once.

        Fatal errors from any stage are logged and reported in the result rather than raised.
        """
        logger.info("Starting Slack group update")
        users: list[str] = []

        try:
            users = self._pagerduty_client.get_oncall_users()
            if not users:
                logger.warning("No on-call users found")
                return SyncResult(status="no_oncall")

            self.notify(users)
            update = self._updater.update(users)
        except SyncError as e:
            logger.exception("Failed to update Slack group")
            return SyncResult(status="failed", oncall_users=users, error=str(e))
        except Exception as e:
            logger.exception("Unexpected error during Slack group update")
            return SyncResult(status="failed", oncall_users=users, error=f"Unexpected error: {e}")

        logger.info("Slack user group update complete", extra={"updated": update.updated})
        return SyncResult(
            status="updated" if update.updated else "no_matches",
            oncall_users=users,
            resolved_user_ids=update.resolved_user_ids,
            unresolved_users=update.unresolved_users,
            previous_members=update.previous_members,
            current_members=update.current_members,
        )
