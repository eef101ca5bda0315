"""
LocalUserReference Value Object - The local account record a federated user points at.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LocalUserReference:
    internal_id: str
    username: Optional[str] = None
    name: Optional[str] = None

    def __post_init__(self):
        if not self.internal_id or not self.internal_id.strip():
            raise ValueError("Local user reference requires an internal id")

    def __str__(self) -> str:
        return self.internal_id
