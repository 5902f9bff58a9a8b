from pydantic import BaseModel, Field, field_validator


class SyncConfig(BaseModel):
    pagerduty_api_token: str = Field(min_length=1)
    slack_api_token: str = Field(min_length=1)
    slack_group_id: str = Field(min_length=1)
    slack_channel_id: str = Field(min_length=1)
    skip_schedules: list[str] = Field(default_factory=list)
    request_timeout: float = Field(default=10, gt=0)
    max_workers: int = Field(default=5, ge=1)

    @field_validator("skip_schedules", mode="before")
    @classmethod
    def split_skip_schedules(cls, value):
        # Env interpolation yields a single comma-separated string.
        if value is None:
            return []
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @field_validator("request_timeout", "max_workers", mode="before")
    @classmethod
    def drop_empty(cls, value, info):
        if value is None or value == "":
            return cls.model_fields[info.field_name].default
        return value
