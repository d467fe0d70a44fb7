"""Custom exception classes for hourlywolves."""
import copy


class HourlyError(Exception):
    """Base exception for hourlywolves errors."""

    def with_context(self, context: str) -> "HourlyError":
        """
        Return a copy of this error with ``context`` prefixed to its message.

        The copy keeps the concrete type and attributes and is chained to the
        original through ``__cause__``.
        """
        wrapped = copy.copy(self)
        wrapped.args = (f'{context}: {self}',)
        wrapped.__cause__ = self
        return wrapped


class ConfigurationError(HourlyError):
    """Raised when a CLI or settings value is invalid."""
    pass


class UrlResolutionError(HourlyError):
    """Raised when the asset path cannot be joined onto the host URL."""
    pass


class NetworkError(HourlyError):
    """Raised when network requests fail."""
    pass


class HttpStatusError(HourlyError):
    """Raised when a response status is outside the 2xx range."""

    def __init__(self, message: str, status_code: int = 0, url: str = '') -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class DecodeError(HourlyError):
    """Raised when a response body is not valid JSON for the expected model."""
    pass


class MissingAttachmentError(HourlyError):
    """Raised when an asset carries no attachments."""
    pass


class WebhookSendError(HourlyError):
    """Raised when posting a message to the webhook fails."""
    pass


class InvalidScheduleError(HourlyError):
    """Raised when a cron expression cannot be parsed."""
    pass


class ClockError(HourlyError):
    """Raised when a wait delta cannot be turned into a sleep duration."""
    pass


def describe_error(error: BaseException) -> str:
    """Flatten an exception and its causes into ``outer: inner: root``."""
    parts: list[str] = []
    current: BaseException | None = error
    while current is not None:
        text = str(current) or type(current).__name__
        # Skip causes whose text the outer message already carries
        if not parts or text not in parts[-1]:
            parts.append(text)
        current = current.__cause__
    return ': '.join(parts)
