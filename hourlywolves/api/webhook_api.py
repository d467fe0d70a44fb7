from typing import Any

from hourlywolves.api.base_api import BaseApi
from hourlywolves.client import Client, redact_url
from hourlywolves.exceptions import HourlyError, WebhookSendError
from hourlywolves.models.message import Message
from hourlywolves.utils.validation import validate_http_url


class WebhookApi(BaseApi):
    """
    Posts messages to a Discord-compatible webhook.

    The webhook URL is fixed at construction and the instance is reused
    for every occurrence.
    """

    def __init__(self, client: Client, webhook_url: str):
        super().__init__(client)
        self.webhook_url = str(validate_http_url(webhook_url, 'webhook URL'))

    async def send_message(self, message: Message) -> Any | None:
        """
        Executes the webhook with ``message``.

        :param message: The message to post
        :return: The webhook's JSON reply, None when it answers 204 No Content
        :raises WebhookSendError: On transport failure or a non-2xx response
        """
        try:
            return await self._client.post_json(self.webhook_url, data=message.to_payload())
        except HourlyError as e:
            raise WebhookSendError(f"sending to {redact_url(self.webhook_url)} failed: {e}") from e
