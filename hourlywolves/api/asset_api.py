from datetime import datetime

import httpx
from pydantic import ValidationError

from hourlywolves.api.base_api import BaseApi
from hourlywolves.client import Client
from hourlywolves.exceptions import DecodeError, HourlyError, MissingAttachmentError, UrlResolutionError
from hourlywolves.models.asset import Asset
from hourlywolves.models.attachment import Attachment
from hourlywolves.utils.dt import as_utc
from hourlywolves.utils.validation import validate_http_url

DEFAULT_HOST = 'https://hourly.photo/u/wolves/'


def format_path(date: datetime) -> str:
    """
    Map an instant to its post path on the photo host, ``p/YYMM/DD/HH``.

    Only years 2000-2099 map onto a two digit year.
    """
    date = as_utc(date)
    return f'p/{date.year - 2000:02d}{date.month:02d}/{date.day:02d}/{date.hour:02d}'


def get_asset_url(host: str | httpx.URL, date: datetime) -> str:
    """
    Resolve the post path for ``date`` against ``host`` (RFC 3986 join).

    :raises UrlResolutionError: If host is not an absolute http(s) URL
    """
    base = validate_http_url(host, 'host')
    try:
        return str(base.join(format_path(date)))
    except httpx.InvalidURL as e:
        raise UrlResolutionError(f"Cannot join {format_path(date)!r} onto {host!r}") from e


class AssetApi(BaseApi):
    """API for reading hourly posts from the photo host."""

    def __init__(self, client: Client, host: str = DEFAULT_HOST):
        super().__init__(client)
        self.host = host

    async def get_asset(self, date: datetime) -> Asset:
        """
        Fetches the post published for the hour of ``date``.

        :param date: Instant whose hour selects the post
        :return: The decoded asset
        :raises UrlResolutionError: If the host URL is malformed
        :raises NetworkError: On transport failure
        :raises HttpStatusError: On a non-2xx response
        :raises DecodeError: If the body does not match the Asset schema
        """
        url = get_asset_url(self.host, date)
        json_response = await self._client.get_json(url)
        try:
            return Asset.model_validate(json_response)
        except ValidationError as e:
            raise DecodeError(f"Invalid asset document from {url}: {e}") from e

    async def get_first_attachment(self, date: datetime) -> Attachment:
        """
        Fetches the post for ``date`` and returns its first attachment.

        :raises MissingAttachmentError: If the post has no attachments
        """
        try:
            asset = await self.get_asset(date)
        except HourlyError as e:
            raise e.with_context('fetching asset failed') from e

        attachment = asset.first_attachment
        if attachment is None:
            raise MissingAttachmentError(f"missing attachment on {get_asset_url(self.host, date)}")
        return attachment
