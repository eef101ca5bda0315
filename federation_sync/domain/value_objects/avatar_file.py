"""
AvatarFile Value Object - Read-only handle over an avatar's bytes.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AvatarFile:
    content: bytes

    def __post_init__(self):
        if not self.content:
            raise ValueError("Avatar file cannot be empty")

    @property
    def size(self) -> int:
        return len(self.content)

    def __repr__(self) -> str:
        return f"AvatarFile(size={self.size})"
