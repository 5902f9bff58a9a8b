from dependency_injector import containers, providers

from config import SyncConfig
from pagerduty import PagerDutyClient
from slack_api import DirectoryMatcher, SlackClient
from sync import GroupMembershipUpdater, OnCallSync


class Container(containers.DeclarativeContainer):
    config = providers.Configuration(yaml_files=["./config.yaml"])

    sync_config = providers.Singleton(
        SyncConfig,
        pagerduty_api_token=config.pagerduty.api_token,
        slack_api_token=config.slack.api_token,
        slack_group_id=config.slack.group_id,
        slack_channel_id=config.slack.channel_id,
        skip_schedules=config.pagerduty.skip_schedules,
        request_timeout=config.request_timeout,
        max_workers=config.max_workers,
    )

    pagerduty_client = providers.Singleton(
        PagerDutyClient,
        api_token=sync_config.provided.pagerduty_api_token,
        skip_schedules=sync_config.provided.skip_schedules,
        timeout=sync_config.provided.request_timeout,
    )

    slack_client = providers.Singleton(
        SlackClient,
        api_token=sync_config.provided.slack_api_token,
        timeout=sync_config.provided.request_timeout,
    )

    directory_matcher = providers.Singleton(DirectoryMatcher, slack_client=slack_client)

    group_updater = providers.Singleton(
        GroupMembershipUpdater,
        slack_client=slack_client,
        matcher=directory_matcher,
        group_id=sync_config.provided.slack_group_id,
        max_workers=sync_config.provided.max_workers,
    )

    oncall_sync = providers.Singleton(
        OnCallSync,
        pagerduty_client=pagerduty_client,
        slack_client=slack_client,
        updater=group_updater,
        channel_id=sync_config.provided.slack_channel_id,
    )
