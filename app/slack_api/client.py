from typing import Any, Optional

import requests
from aws_lambda_powertools import Logger


logger = Logger(child=True)


class SlackApiError(Exception):
    def __init__(self, method: str, error: str):
        super().__init__(f"{method} failed: {error}")
        self.method = method
        self.error = error


class SlackClient:
    SLACK_API_BASE = "https://slack.com/api/"

    def __init__(self, api_token: str, timeout: float = 10):
        self._api_token = api_token
        self._timeout = timeout

    def _headers(self, json_body: bool = False) -> dict[str, str]:
        headers = {"Authorization": f"Bearer {self._api_token}"}
        if json_body:
            headers["Content-Type"] = "application/json; charset=utf-8"
        return headers

    def _check(self, method: str, response: requests.Response) -> dict[str, Any]:
        response.raise_for_status()
        result = response.json()
        if not result.get("ok"):
            raise SlackApiError(method, result.get("error", "unknown_error"))
        return result

    def _get(self, method: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        try:
            response = requests.get(
                f"{self.SLACK_API_BASE}{method}",
                params=params,
                headers=self._headers(),
                timeout=self._timeout,
            )
            return self._check(method, response)
        except (requests.RequestException, ValueError) as e:
            raise SlackApiError(method, str(e)) from e

    def _post(self, method: str, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            response = requests.post(
                f"{self.SLACK_API_BASE}{method}",
                json=payload,
                headers=self._headers(json_body=True),
                timeout=self._timeout,
            )
            return self._check(method, response)
        except (requests.RequestException, ValueError) as e:
            raise SlackApiError(method, str(e)) from e

    def list_group_members(self, group_id: str) -> list[str]:
        result = self._get("usergroups.users.list", {"usergroup": group_id, "include_disabled": "true"})
        return result.get("users") or []

    def get_user_info(self, user_id: str) -> dict[str, Any]:
        result = self._get("users.info", {"user": user_id})
        return result.get("user") or {}

    def list_users(self) -> list[dict[str, Any]]:
        result = self._get("users.list")
        return result.get("members") or []

    def update_group_members(self, group_id: str, user_ids: list[str]) -> None:
        self._post("usergroups.users.update", {"usergroup": group_id, "users": ",".join(user_ids)})
        logger.info("Slack user group updated", extra={"group_id": group_id, "user_ids": user_ids})

    def post_message(self, channel: str, text: str) -> None:
        self._post(
            "chat.postMessage",
            {
                "channel": channel,
                "text": text,
                "link_names": False,
                "mrkdwn": True,
            },
        )
        logger.info("Slack message sent successfully", extra={"channel": channel})
