from __future__ import annotations

from pydantic import Field

from hourlywolves.models.meta import ActivityModel


class Attachment(ActivityModel):
    """
    A media reference on an asset. The photo host publishes one image
    attachment per hourly post, the ``url`` is the displayable image.
    """
    kind: str = Field(default='', alias='type')  # 'Document'
    media_type: str = ''  # 'image/jpeg'
    url: str = ''
