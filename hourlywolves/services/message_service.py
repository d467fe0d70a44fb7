from datetime import datetime

import httpx

from hourlywolves.api.asset_api import get_asset_url
from hourlywolves.models.attachment import Attachment
from hourlywolves.models.message import Embed, EmbedFooter, EmbedImage, Message
from hourlywolves.utils.dt import format_rfc3339

FOOTER_TEXT = 'Made with <3 by @kaylendog · Provided by hourly.photo'


def build_description(asset_url: str, attachment_url: str) -> str:
    return f'[LINK]({asset_url}) · [PERMALINK]({attachment_url})'


def build_message(host: str | httpx.URL, ev_time: datetime, attachment: Attachment) -> Message:
    """
    Build the webhook message announcing the post for ``ev_time``.

    The single embed shows the attachment image, stamps the event time and
    links both the post page and the raw image.

    :param host: Photo host the post was read from
    :param ev_time: The occurrence being dispatched
    :param attachment: The post's first attachment
    :return: Message with exactly one embed
    :raises UrlResolutionError: If the host URL is malformed
    """
    asset_url = get_asset_url(host, ev_time)
    embed = Embed(
        image=EmbedImage(url=attachment.url),
        timestamp=format_rfc3339(ev_time),
        description=build_description(asset_url, attachment.url),
        footer=EmbedFooter(text=FOOTER_TEXT),
    )
    return Message(embeds=[embed])
