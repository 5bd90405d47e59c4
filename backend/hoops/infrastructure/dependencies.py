"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends

from hoops.config import Settings, get_settings
from hoops.application.interfaces import HoopMediaSaver, HoopSaver
from hoops.application.services import (
    HoopReplicationService,
    HoopSubmissionService,
    NotificationDispatcher,
)
from hoops.infrastructure.credentials.token_cache import TokenCacheCredentialProvider
from hoops.infrastructure.notifications.email_notifier import EmailNotifier, EmailSettings
from hoops.infrastructure.spreadsheets import GoogleSpreadsheetHoopSaver
from hoops.infrastructure.storage.local_file_storage import (
    FilesystemHoopMediaSaver,
    FilesystemHoopReader,
    FilesystemHoopSaver,
)


def build_spreadsheet_saver(settings: Settings) -> GoogleSpreadsheetHoopSaver:
    credentials = TokenCacheCredentialProvider(
        settings.oauth_token_cache_file,
        timeout=settings.spreadsheet_timeout,
    )
    return GoogleSpreadsheetHoopSaver(
        credentials=credentials,
        key=settings.spreadsheet_key,
        worksheet_index=settings.worksheet_index,
        feeds_url=settings.spreadsheet_feeds_url,
    )


def build_record_saver(settings: Settings) -> HoopSaver:
    """Pick the record backend named by ``settings.record_backend``."""
    if settings.record_backend == "spreadsheet":
        return build_spreadsheet_saver(settings)
    return FilesystemHoopSaver(settings.data_dir)


def build_replication_service(settings: Settings) -> HoopReplicationService:
    return HoopReplicationService(
        reader=FilesystemHoopReader(settings.data_dir),
        target=build_spreadsheet_saver(settings),
    )


@lru_cache
def get_notification_dispatcher() -> NotificationDispatcher:
    """One dispatcher per process so in-flight tasks stay referenced."""
    settings = get_settings()
    notifier = EmailNotifier(
        EmailSettings(
            host=settings.email_sending_host,
            port=settings.email_sending_port,
            username=settings.email_sending_username,
            password=settings.email_sending_password,
            from_email=settings.email_sending_email,
            to_email=settings.notification_email,
        )
    )
    return NotificationDispatcher(notifier)


def get_record_saver(settings: Settings = Depends(get_settings)) -> HoopSaver:
    return build_record_saver(settings)


def get_media_saver(settings: Settings = Depends(get_settings)) -> HoopMediaSaver:
    return FilesystemHoopMediaSaver(settings.data_dir)


async def get_hoop_submission_service(
    media_saver: HoopMediaSaver = Depends(get_media_saver),
    saver: HoopSaver = Depends(get_record_saver),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> AsyncGenerator[HoopSubmissionService, None]:
    """Provides a HoopSubmissionService with its backends wired up."""
    yield HoopSubmissionService(
        media_saver=media_saver,
        saver=saver,
        dispatcher=dispatcher,
    )
