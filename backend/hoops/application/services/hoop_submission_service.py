"""Application service (use case) for accepting a submitted hoop."""

from collections.abc import Mapping

from hoops.application.interfaces import HoopMediaSaver, HoopSaver
from hoops.application.services.intake_service import HoopIntake
from hoops.application.services.notification_dispatcher import NotificationDispatcher
from hoops.domain.entities import Hoop, PendingUpload
from hoops.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

plog = PipelineLogger()


class HoopSubmissionService:
    """Orchestrates intake → save → notification. Depends on the ports (DI)."""

    def __init__(
        self,
        media_saver: HoopMediaSaver | None,
        saver: HoopSaver,
        dispatcher: NotificationDispatcher | None = None,
        intake: HoopIntake | None = None,
    ):
        self._media_saver = media_saver
        self._saver = saver
        self._dispatcher = dispatcher
        self._intake = intake or HoopIntake()

    async def submit(
        self,
        fields: Mapping[str, str],
        upload: PendingUpload | None = None,
    ) -> Hoop:
        """Build a hoop from the form and save it.

        Raises whatever the record saver raises; the media saver's failures
        only cost the hoop its image.
        """
        hoop = self._intake.from_form(fields, upload)
        plog.step_start(
            PipelineStage.INTAKE,
            f"Hoop {hoop.id}",
            fields=len(fields),
            image=hoop.pending_upload is not None,
        )

        with plog.timed_step(PipelineStage.RECORD, f"Saving {hoop.storage_key}"):
            await hoop.save(self._media_saver, self._saver)
        if hoop.image:
            plog.detail(f"image={hoop.image}")

        if self._dispatcher is not None and self._dispatcher.dispatch(hoop) is not None:
            plog.detail("notification dispatched")

        plog.step_complete(PipelineStage.COMPLETE, f"Hoop {hoop.id} saved")
        return hoop
