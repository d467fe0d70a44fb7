from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class EmbedImage(BaseModel):
    url: str


class EmbedFooter(BaseModel):
    text: str
    icon_url: str | None = None


class Embed(BaseModel):
    title: str | None = None
    description: str | None = None
    url: str | None = None
    timestamp: str | None = None  # RFC 3339
    color: int | None = None
    image: EmbedImage | None = None
    footer: EmbedFooter | None = None


class Message(BaseModel):
    """Payload for a Discord-compatible "execute webhook" request."""
    content: str | None = None
    username: str | None = None
    avatar_url: str | None = None
    embeds: list[Embed] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON body, omitting unset optional fields."""
        return self.model_dump(mode='json', exclude_none=True)
