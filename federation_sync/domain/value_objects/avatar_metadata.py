"""
AvatarMetadata Value Object - Content type and file name of a stored avatar.

Both fields are needed for an upload. Stores may read records where one of
them is missing, so the fields are optional and completeness is checked by
is_complete().
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AvatarMetadata:
    content_type: Optional[str]
    file_name: Optional[str]

    def is_complete(self) -> bool:
        return bool(self.content_type) and bool(self.file_name)
