from collections.abc import Iterator
from datetime import datetime

from loguru import logger

from hourlywolves.api.asset_api import AssetApi
from hourlywolves.api.webhook_api import WebhookApi
from hourlywolves.client import Client, redact_url
from hourlywolves.dispatcher import Dispatcher, RunSummary
from hourlywolves.schedule import Schedule, single_shot
from hourlywolves.utils.settings import DispatchConfig


class HourlyWolves:
    """
    Main orchestrator: wires the HTTP client, the APIs and the dispatcher
    from a validated run configuration.

    The schedule is parsed before anything else is created, so an invalid
    expression fails startup without opening a client.
    """

    def __init__(self, config: DispatchConfig, client: Client | None = None) -> None:
        """
        :param config: Validated run options
        :param client: HTTP client to share, a new one is created if omitted
        :raises InvalidScheduleError: If the cron expression is malformed
        """
        self.config = config
        self.schedule = None if config.run_now else Schedule.from_expression(config.schedule)

        self._client = client or Client()
        self.asset_api = AssetApi(self._client, config.host)
        self.webhook_api = WebhookApi(self._client, config.webhook_url)
        self.dispatcher = Dispatcher(self.asset_api, self.webhook_api)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.close()

    async def __aenter__(self) -> "HourlyWolves":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def occurrences(self, now: datetime | None = None) -> Iterator[datetime]:
        """Upcoming occurrences, or a single one at ``now`` in run-now mode."""
        if self.schedule is None:
            return single_shot(now)
        return self.schedule.upcoming(now)

    async def run(self) -> RunSummary:
        if self.schedule is None:
            logger.info(f"Dispatching once to {redact_url(self.config.webhook_url)}")
        else:
            logger.info(
                f"Dispatching to {redact_url(self.config.webhook_url)} "
                f"on schedule {self.schedule.expression!r}"
            )
        return await self.dispatcher.run(self.occurrences())
