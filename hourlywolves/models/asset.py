from __future__ import annotations

from pydantic import Field

from hourlywolves.models.attachment import Attachment
from hourlywolves.models.meta import ActivityModel


class Tag(ActivityModel):
    kind: str = Field(default='', alias='type')  # 'Hashtag'
    name: str = ''


class Asset(ActivityModel):
    kind: str = Field(default='', alias='type')  # 'Note'
    actor: str = ''
    attributed_to: str = ''
    attachment: list[Attachment] = Field(default_factory=list)
    to: list[str] = Field(default_factory=list)
    cc: list[str] = Field(default_factory=list)
    content: str = ''
    tag: list[Tag] = Field(default_factory=list)
    published: str = ''
    id: str = ''
    context: str = ''
    conversation: str = ''

    @property
    def first_attachment(self) -> Attachment | None:
        return self.attachment[0] if self.attachment else None
