"""
FederationInfrastructureError - Base for failures of ports and the bridge.

These are never turned into a silent pipeline halt. They propagate to the
event intake, which decides whether the event is redelivered.
"""


class FederationInfrastructureError(Exception):
    """Base class for infrastructure failures raised by adapters."""

    def __init__(self, message: str = "Federation infrastructure unavailable"):
        super().__init__(message)
        self.message = message
