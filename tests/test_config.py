import pytest
from pydantic import ValidationError

from config import SyncConfig
from container import Container


BASE = {
    "pagerduty_api_token": "pd-token",
    "slack_api_token": "xoxb-test",
    "slack_group_id": "S0GROUP",
    "slack_channel_id": "C0CHANNEL",
}


class TestSyncConfig:
    def test_defaults(self):
        config = SyncConfig(**BASE)

        assert config.skip_schedules == []
        assert config.request_timeout == 10
        assert config.max_workers == 5

    def test_skip_schedules_from_comma_separated_string(self):
        config = SyncConfig(**BASE, skip_schedules="S1, S2,,")

        assert config.skip_schedules == ["S1", "S2"]

    def test_skip_schedules_from_list(self):
        config = SyncConfig(**BASE, skip_schedules=["S1"])

        assert config.skip_schedules == ["S1"]

    def test_empty_values_use_defaults(self):
        config = SyncConfig(**BASE, skip_schedules=None, request_timeout="", max_workers=None)

        assert config.skip_schedules == []
        assert config.request_timeout == 10
        assert config.max_workers == 5

    def test_empty_token_rejected(self):
        with pytest.raises(ValidationError):
            SyncConfig(**{**BASE, "slack_api_token": ""})

    def test_missing_group_rejected(self):
        with pytest.raises(ValidationError):
            SyncConfig(**{k: v for k, v in BASE.items() if k != "slack_group_id"})

    def test_max_workers_must_be_positive(self):
        with pytest.raises(ValidationError):
            SyncConfig(**BASE, max_workers=0)


class TestContainer:
    def test_wires_components_from_config(self):
        container = Container()
        container.config.from_dict(
            {
                "pagerduty": {"api_token": "pd-token", "skip_schedules": ["S1"]},
                "slack": {"api_token": "xoxb-test", "group_id": "S0GROUP", "channel_id": "C0CHANNEL"},
                "request_timeout": 3,
            }
        )

        sync_config = container.sync_config()
        assert sync_config.skip_schedules == ["S1"]
        assert sync_config.request_timeout == 3
        assert container.oncall_sync() is container.oncall_sync()
        assert container.group_updater() is container.oncall_sync()._updater

    def test_missing_config_raises_validation_error(self):
        container = Container()

        with pytest.raises(ValidationError):
            container.oncall_sync()
