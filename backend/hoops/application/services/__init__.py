from .intake_service import HoopIntake
from .notification_dispatcher import NotificationDispatcher
from .hoop_submission_service import HoopSubmissionService
from .hoop_replication_service import HoopReplicationService

__all__ = [
    "HoopIntake",
    "NotificationDispatcher",
    "HoopSubmissionService",
    "HoopReplicationService",
]
