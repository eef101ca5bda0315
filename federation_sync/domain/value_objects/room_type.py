"""
RoomType Value Object - Local room type codes.
"""

from enum import Enum


class RoomType(str, Enum):
    DIRECT_MESSAGE = "d"
    CHANNEL = "c"
    PRIVATE_GROUP = "p"
    LIVE_CHAT = "l"

    @classmethod
    def is_known(cls, code: str) -> bool:
        return any(member.value == code for member in cls)

    @classmethod
    def from_code(cls, code: str) -> "RoomType":
        try:
            return cls(code)
        except ValueError:
            raise ValueError(f"Unknown room type code: {code!r}") from None
