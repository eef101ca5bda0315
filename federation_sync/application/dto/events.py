"""Payloads of the internal events consumed by the federation listener."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool


class AvatarUpdateEvent(BaseModel):
    """`user.avatarUpdate` payload."""

    model_config = ConfigDict(extra="ignore")

    username: Optional[str] = None


class TypingUser(BaseModel):
    model_config = ConfigDict(extra="ignore")

    username: Optional[str] = None


class TypingEvent(BaseModel):
    """`user.typing` payload."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    room_id: Optional[str] = Field(default=None, alias="roomId")
    user: TypingUser = Field(default_factory=TypingUser)
    is_typing: StrictBool = Field(alias="isTyping")
