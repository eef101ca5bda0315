"""
Guarded pipeline primitives.

A use case is a chain of steps. Each step returns a Guard: either it
proceeds with a value for the next step, or it halts with a reason. A halt
is a normal business outcome (user not found, setting disabled, ...), never
an exception.

Usage:
    user = await self._resolve_user(username)
    if user.halted:
        return self._stop(user)
    room = await self._resolve_room(room_id)
    ...
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar, cast

from federation_sync.domain.exceptions import PreconditionError

T = TypeVar("T")


class HaltReason(str, Enum):
    USER_NOT_FOUND = "user_not_found"
    REMOTE_USER = "remote_user"
    MISSING_INTERNAL_ID = "missing_internal_id"
    AVATAR_NOT_FOUND = "avatar_not_found"
    AVATAR_METADATA_MISSING = "avatar_metadata_missing"
    UPLOAD_REJECTED = "upload_rejected"
    WRITE_BACK_REJECTED = "write_back_rejected"
    TYPING_DISABLED = "typing_disabled"
    ROOM_NOT_FOUND = "room_not_found"


@dataclass(frozen=True)
class Guard(Generic[T]):
    """Result of one pipeline step."""

    _value: Optional[T] = None
    reason: Optional[HaltReason] = None

    @classmethod
    def proceed(cls, value: T) -> "Guard[T]":
        return cls(_value=value)

    @classmethod
    def halt(cls, reason: HaltReason) -> "Guard[T]":
        return cls(reason=reason)

    @property
    def halted(self) -> bool:
        return self.reason is not None

    def unwrap(self) -> T:
        if self.reason is not None:
            raise PreconditionError(f"Pipeline step halted: {self.reason.value}")
        return cast(T, self._value)


@dataclass(frozen=True)
class PipelineOutcome:
    """What a use case did. Halted outcomes carry the first failing guard."""

    use_case: str
    reason: Optional[HaltReason] = None

    @classmethod
    def completed(cls, use_case: str) -> "PipelineOutcome":
        return cls(use_case=use_case)

    @classmethod
    def halted(cls, use_case: str, reason: HaltReason) -> "PipelineOutcome":
        return cls(use_case=use_case, reason=reason)

    @property
    def is_completed(self) -> bool:
        return self.reason is None
