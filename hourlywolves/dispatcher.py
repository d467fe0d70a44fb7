import asyncio
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from loguru import logger

from hourlywolves.api.asset_api import AssetApi
from hourlywolves.api.webhook_api import WebhookApi
from hourlywolves.exceptions import ClockError, HourlyError, describe_error
from hourlywolves.services.message_service import build_message
from hourlywolves.utils.dt import as_utc, get_utc_now


class DispatchState(str, Enum):
    WAITING = 'waiting'
    FETCHING = 'fetching'
    SENDING = 'sending'
    DONE = 'done'


@dataclass(frozen=True)
class DispatchOutcome:
    ev_time: datetime
    # Stage the occurrence failed in, None on success
    failed_stage: DispatchState | None = None
    error: HourlyError | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass
class RunSummary:
    dispatched: int = 0
    failed: int = 0
    last_outcome: DispatchOutcome | None = None

    def record(self, outcome: DispatchOutcome) -> None:
        if outcome.succeeded:
            self.dispatched += 1
        else:
            self.failed += 1
        self.last_outcome = outcome


class Dispatcher:
    """
    Runs occurrences through wait, fetch and send, one at a time.

    Errors are handled with a tolerant policy: a failed occurrence is logged
    and recorded, and the next occurrence is still dispatched.
    """

    def __init__(
        self,
        asset_api: AssetApi,
        webhook_api: WebhookApi,
        now: Callable[[], datetime] = get_utc_now,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """
        :param asset_api: Reads posts from the photo host
        :param webhook_api: Posts messages to the webhook
        :param now: Clock returning the current aware UTC instant
        :param sleep: Coroutine function suspending for a number of seconds
        """
        self.asset_api = asset_api
        self.webhook_api = webhook_api
        self._now = now
        self._sleep = sleep

    async def wait_until(self, ev_time: datetime) -> None:
        """
        Suspend until the clock reaches ``ev_time``.

        The remaining delay is recomputed after every wake-up, so early
        wake-ups and clock adjustments never start a dispatch before
        ``ev_time``.

        :raises ClockError: If the delay cannot be slept
        """
        ev_time = as_utc(ev_time)
        while True:
            delta = ev_time - self._now()
            if delta <= timedelta(0):
                return
            logger.info(f"Next event scheduled for {ev_time} - sleeping for {delta}")
            try:
                await self._sleep(delta.total_seconds())
            except (OverflowError, ValueError) as e:
                raise ClockError(f"cannot sleep for {delta}") from e

    async def dispatch(self, ev_time: datetime) -> DispatchOutcome:
        """
        Wait for one occurrence, then fetch its attachment and post it.

        :param ev_time: The occurrence
        :return: Outcome, carrying the error and failed stage on failure
        """
        ev_time = as_utc(ev_time)
        state = DispatchState.WAITING
        try:
            await self.wait_until(ev_time)

            state = DispatchState.FETCHING
            attachment = await self.asset_api.get_first_attachment(ev_time)

            state = DispatchState.SENDING
            logger.info(f"Dispatching event for {ev_time} to webhook")
            message = build_message(self.asset_api.host, ev_time, attachment)
            await self.webhook_api.send_message(message)
        except HourlyError as e:
            logger.error(f"Error encountered during dispatch ({state.value}): {describe_error(e)}")
            return DispatchOutcome(ev_time=ev_time, failed_stage=state, error=e)

        logger.info(f"Dispatched event for {ev_time}: {attachment.url}")
        return DispatchOutcome(ev_time=ev_time)

    async def run(self, occurrences: Iterable[datetime]) -> RunSummary:
        """
        Dispatch every occurrence in order.

        Returns only once ``occurrences`` is exhausted, which never happens
        for a cron schedule.
        """
        summary = RunSummary()
        for ev_time in occurrences:
            summary.record(await self.dispatch(ev_time))
        return summary
