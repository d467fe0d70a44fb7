"""Command line entry point."""
import asyncio
from typing import Annotated

import typer
from loguru import logger

from hourlywolves.api.asset_api import DEFAULT_HOST
from hourlywolves.dispatcher import RunSummary
from hourlywolves.exceptions import HourlyError, describe_error
from hourlywolves.hourly import HourlyWolves
from hourlywolves.schedule import DEFAULT_SCHEDULE
from hourlywolves.utils.log import init_logger
from hourlywolves.utils.settings import build_dispatch_config, get_settings

app = typer.Typer(
    name="hourlywolves",
    help="A tiny tool to push hourly wolf images to Discord.",
    add_completion=False,
)


async def _run(hourly: HourlyWolves) -> RunSummary:
    async with hourly:
        return await hourly.run()


@app.command()
def main(
    webhook_url: Annotated[str, typer.Argument(help="The webhook URL.")],
    host: Annotated[str, typer.Argument(help="The host URL.")] = DEFAULT_HOST,
    now: Annotated[
        bool,
        typer.Option("--now", "-n", help="Dispatch once immediately and exit"),
    ] = False,
    schedule: Annotated[
        str,
        typer.Option(
            "--schedule",
            "-s",
            help="Cron expression: sec min hour day month weekday [year]",
        ),
    ] = DEFAULT_SCHEDULE,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging"),
    ] = False,
) -> None:
    """Post the photo of the hour to a webhook, on a schedule or right now."""
    init_logger(debug or get_settings().debug)

    try:
        config = build_dispatch_config(
            webhook_url=webhook_url,
            host=host,
            schedule=schedule,
            run_now=now,
        )
        hourly = HourlyWolves(config)
    except HourlyError as e:
        logger.error(describe_error(e))
        raise typer.Exit(1) from None

    try:
        summary = asyncio.run(_run(hourly))
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting")
        return

    if summary.failed:
        raise typer.Exit(1)
