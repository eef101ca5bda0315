"""
PreconditionError - Raised when an entity is asked for state it was not built with.
Example: the internal id of a user created without a local reference.
"""


class PreconditionError(Exception):
    """Raised when an entity accessor is called outside its contract."""

    def __init__(self, message: str = "Entity precondition not met"):
        super().__init__(message)
        self.message = message
