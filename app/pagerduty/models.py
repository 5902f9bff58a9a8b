from typing import Optional

from pydantic import BaseModel


class OnCallUser(BaseModel):
    id: str
    display_name: str


class OnCallAssignment(BaseModel):
    schedule_id: str
    user: OnCallUser

    @classmethod
    def from_pagerduty_payload(cls, payload: dict) -> Optional["OnCallAssignment"]:
        """Build an assignment from one `oncalls[]` entry, or None when user or schedule is absent."""
        user = payload.get("user")
        schedule = payload.get("schedule")
        if not user or not schedule:
            return None

        return cls(
            schedule_id=schedule.get("id", ""),
            user=OnCallUser(id=user.get("id", ""), display_name=user.get("summary", "")),
        )
