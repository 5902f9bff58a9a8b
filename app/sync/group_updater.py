from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from aws_lambda_powertools import Logger
from pydantic import BaseModel, Field

from errors import GroupUpdateError
from slack_api import DirectoryMatcher, SlackApiError, SlackClient


logger = Logger(child=True)


class GroupUpdateResult(BaseModel):
    updated: bool = False
    resolved_user_ids: list[str] = Field(default_factory=list)
    unresolved_users: list[str] = Field(default_factory=list)
    previous_members: list[str] = Field(default_factory=list)
    current_members: list[str] = Field(default_factory=list)


class GroupMembershipUpdater:
    def __init__(
        self,
        slack_client: SlackClient,
        matcher: DirectoryMatcher,
        group_id: str,
        max_workers: int = 5,
    ):
        self._slack_client = slack_client
        self._matcher = matcher
        self._group_id = group_id
        self._max_workers = max_workers

    def get_current_members(self) -> list[str]:
        """Return the real names of the group's current members.

        Members whose profile cannot be fetched are left out of the list.
        """
        user_ids = self._slack_client.list_group_members(self._group_id)

        names = []
        for user_id in user_ids:
            try:
                user = self._slack_client.get_user_info(user_id)
            except SlackApiError as e:
                logger.warning("Failed to get member info", extra={"user_id": user_id, "error": str(e)})
                continue
            if user:
                names.append(user.get("real_name") or "")
        return names

    def update(self, users: list[str]) -> GroupUpdateResult:
        result = GroupUpdateResult()

        try:
            result.previous_members = self.get_current_members()
            logger.info(
                "Current group members",
                extra={"members": ", ".join(result.previous_members) or "None"},
            )

            logger.info("Looking up Slack IDs for users", extra={"users": users})
            for user, slack_id in zip(users, self._resolve_all(users)):
                if slack_id:
                    result.resolved_user_ids.append(slack_id)
                    logger.info("Found Slack ID", extra={"user": user, "slack_id": slack_id})
                else:
                    result.unresolved_users.append(user)
                    logger.warning("Could not find Slack ID", extra={"user": user})

            if not result.resolved_user_ids:
                logger.warning("No valid Slack user IDs found, skipping update")
                return result

            logger.info("Updating Slack user group", extra={"group_id": self._group_id, "users": users})
            self._slack_client.update_group_members(self._group_id, result.resolved_user_ids)
            result.updated = True
        except SlackApiError as e:
            raise GroupUpdateError(f"Failed to update group members: {e}") from e

        result.current_members = self._get_new_members()
        logger.info("Successfully updated Slack group members")
        return result

    def _resolve_all(self, users: list[str]) -> list[Optional[str]]:
        if not users:
            return []

        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            return list(executor.map(self._matcher.find_user_id, users))

    def _get_new_members(self) -> list[str]:
        # The overwrite already went through at this point; a failed read only loses the log line.
        try:
            members = self.get_current_members()
        except SlackApiError as e:
            logger.warning("Failed to fetch new group members", extra={"error": str(e)})
            return []

        logger.info("New group members", extra={"members": ", ".join(members) or "None"})
        return members
