"""SMTP notifier. Mails a short notice whenever a hoop is added."""

import asyncio
import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage

from hoops.application.interfaces import HoopNotifier
from hoops.domain.entities import Hoop

logger = logging.getLogger(__name__)

SUBJECT = "[hoops] New hoop added"


@dataclass(frozen=True)
class EmailSettings:
    """SMTP configuration."""

    host: str = ""
    port: int = 25
    username: str = ""
    password: str = ""
    from_email: str = ""
    to_email: str = ""

    @property
    def is_configured(self) -> bool:
        return bool(self.host and self.username and self.password and self.to_email)


class EmailNotifier(HoopNotifier):
    """Infrastructure adapter — sends notification mail through ``smtplib``.

    ``smtplib`` blocks, so delivery runs in a worker thread.
    """

    def __init__(self, settings: EmailSettings, smtp_factory=smtplib.SMTP):
        self._settings = settings
        self._smtp_factory = smtp_factory

    @property
    def enabled(self) -> bool:
        return self._settings.is_configured

    def build_message(self, hoop: Hoop) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self._settings.from_email
        message["To"] = self._settings.to_email
        message["Subject"] = SUBJECT
        message.set_content(f"A new hoop has been added. Its ID is {hoop.id}")
        return message

    def _send(self, message: EmailMessage) -> None:
        s = self._settings
        with self._smtp_factory(s.host, s.port) as smtp:
            smtp.login(s.username, s.password)
            smtp.send_message(message)

    async def notify(self, hoop: Hoop) -> None:
        if not self.enabled:
            logger.debug("Email notifications disabled; skipping hoop %s", hoop.id)
            return
        await asyncio.to_thread(self._send, self.build_message(hoop))
        logger.info("Sent new-hoop notification for %s to %s", hoop.id, self._settings.to_email)
