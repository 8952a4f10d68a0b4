# Services package

from productive_box.services.publish_orchestrator import (
    PublishOrchestrator,
    PublishResult,
    PublishStatus,
)

__all__ = [
    "PublishOrchestrator",
    "PublishResult",
    "PublishStatus",
]
