"""hourlywolves.

Posts the photo of the hour from an hourly.photo feed to a Discord webhook,
on a cron schedule or once on demand.

Example usage:
    from hourlywolves import HourlyWolves, build_dispatch_config

    config = build_dispatch_config(webhook_url="https://discord.com/api/webhooks/1/token")
    async with HourlyWolves(config) as hourly:
        await hourly.run()
"""

from hourlywolves.hourly import HourlyWolves
from hourlywolves.client import Client
from hourlywolves.dispatcher import Dispatcher, DispatchOutcome, DispatchState, RunSummary
from hourlywolves.exceptions import (
    HourlyError,
    ConfigurationError,
    UrlResolutionError,
    NetworkError,
    HttpStatusError,
    DecodeError,
    MissingAttachmentError,
    WebhookSendError,
    InvalidScheduleError,
    ClockError,
)
from hourlywolves.schedule import Schedule, single_shot
from hourlywolves.utils.settings import DispatchConfig, build_dispatch_config

# Models
from hourlywolves.models.asset import Asset, Tag
from hourlywolves.models.attachment import Attachment
from hourlywolves.models.message import Embed, Message

# APIs and services
from hourlywolves.api.asset_api import AssetApi, format_path, get_asset_url
from hourlywolves.api.webhook_api import WebhookApi
from hourlywolves.services.message_service import build_message

__version__ = "0.1.0"

__all__ = [
    # Main entry point
    "HourlyWolves",
    "Client",
    "Dispatcher",
    "DispatchOutcome",
    "DispatchState",
    "RunSummary",
    "Schedule",
    "single_shot",
    "DispatchConfig",
    "build_dispatch_config",
    # Exceptions
    "HourlyError",
    "ConfigurationError",
    "UrlResolutionError",
    "NetworkError",
    "HttpStatusError",
    "DecodeError",
    "MissingAttachmentError",
    "WebhookSendError",
    "InvalidScheduleError",
    "ClockError",
    # Models
    "Asset",
    "Tag",
    "Attachment",
    "Embed",
    "Message",
    # APIs and services
    "AssetApi",
    "WebhookApi",
    "format_path",
    "get_asset_url",
    "build_message",
]
