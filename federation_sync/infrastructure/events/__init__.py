from federation_sync.infrastructure.events.in_process_event_bus import (
    EventHandler,
    InProcessEventBus,
)

__all__ = ["EventHandler", "InProcessEventBus"]
