"""Unit tests for the notification dispatcher and the SMTP notifier."""

import asyncio
import logging

import pytest

from hoops.application.interfaces import HoopNotifier
from hoops.application.services import NotificationDispatcher
from hoops.domain.entities import Hoop
from hoops.infrastructure.notifications.email_notifier import (
    SUBJECT,
    EmailNotifier,
    EmailSettings,
)


class FakeNotifier(HoopNotifier):
    def __init__(self, error: Exception | None = None, enabled: bool = True):
        self.notified: list[str] = []
        self._error = error
        self._enabled = enabled

    @property
    def enabled(self) -> bool:
        return self._enabled

    async def notify(self, hoop: Hoop) -> None:
        await asyncio.sleep(0)
        if self._error:
            raise self._error
        self.notified.append(hoop.id)


class FakeSMTP:
    """Stands in for smtplib.SMTP; records what it was asked to do."""

    instances: list["FakeSMTP"] = []

    def __init__(self, host: str, port: int):
        self.host = host
        self.port = port
        self.logins: list[tuple[str, str]] = []
        self.messages = []
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def login(self, username: str, password: str) -> None:
        self.logins.append((username, password))

    def send_message(self, message) -> None:
        self.messages.append(message)


SMTP_SETTINGS = EmailSettings(
    host="smtp.test",
    port=2525,
    username="hoops",
    password="secret",
    from_email="hoops@test",
    to_email="admin@test",
)


# ── Dispatcher ──


@pytest.mark.asyncio
async def test_dispatch_runs_detached_task():
    notifier = FakeNotifier()
    dispatcher = NotificationDispatcher(notifier)
    hoop = Hoop.create()

    task = dispatcher.dispatch(hoop)
    assert task is not None
    assert notifier.notified == []

    await task
    assert notifier.notified == [hoop.id]
    assert dispatcher.pending == set()


@pytest.mark.asyncio
async def test_dispatch_failure_is_logged_not_raised(caplog):
    dispatcher = NotificationDispatcher(FakeNotifier(error=ConnectionRefusedError("smtp down")))

    with caplog.at_level(logging.ERROR):
        task = dispatcher.dispatch(Hoop.create())
        await asyncio.wait({task})
        await asyncio.sleep(0)

    assert "smtp down" in caplog.text
    assert dispatcher.pending == set()


@pytest.mark.asyncio
async def test_dispatch_skips_disabled_notifier():
    notifier = FakeNotifier(enabled=False)
    assert NotificationDispatcher(notifier).dispatch(Hoop.create()) is None
    assert NotificationDispatcher(None).dispatch(Hoop.create()) is None


# ── EmailNotifier ──


def test_email_notifier_requires_credentials():
    assert EmailNotifier(SMTP_SETTINGS).enabled
    assert not EmailNotifier(EmailSettings(host="smtp.test")).enabled


def test_build_message_names_hoop():
    hoop = Hoop.create()
    message = EmailNotifier(SMTP_SETTINGS).build_message(hoop)

    assert message["Subject"] == SUBJECT
    assert message["To"] == "admin@test"
    assert hoop.id in message.get_content()


@pytest.mark.asyncio
async def test_notify_sends_through_smtp():
    FakeSMTP.instances.clear()
    hoop = Hoop.create()

    await EmailNotifier(SMTP_SETTINGS, smtp_factory=FakeSMTP).notify(hoop)

    [smtp] = FakeSMTP.instances
    assert (smtp.host, smtp.port) == ("smtp.test", 2525)
    assert smtp.logins == [("hoops", "secret")]
    assert len(smtp.messages) == 1


@pytest.mark.asyncio
async def test_notify_disabled_sends_nothing():
    FakeSMTP.instances.clear()
    await EmailNotifier(EmailSettings(), smtp_factory=FakeSMTP).notify(Hoop.create())
    assert FakeSMTP.instances == []
