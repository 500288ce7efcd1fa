"""
Notifier adapters

SMTP delivery for production and an in-memory outbox used when mail is
disabled (local development and tests).
"""

import asyncio
import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from typing import List

from staffdesk.app.services.notifier import INotifier, NotificationError

logger = logging.getLogger(__name__)


class SmtpNotifier(INotifier):
    """Sends plain-text email through an SMTP relay"""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        from_email: str,
        use_ssl: bool = False,
        use_starttls: bool = True,
        timeout: int = 15,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.from_email = from_email or username
        self.use_ssl = use_ssl
        self.use_starttls = use_starttls and not use_ssl
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> "SmtpNotifier":
        return cls(
            host=config.SMTP_HOST,
            port=config.SMTP_PORT,
            username=config.SMTP_USERNAME,
            password=config.SMTP_PASSWORD,
            from_email=config.MAIL_FROM,
            use_ssl=config.SMTP_USE_SSL,
            use_starttls=config.SMTP_USE_STARTTLS,
        )

    def _build_message(self, recipient: str, subject: str, body: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.from_email
        message["To"] = recipient
        message["Subject"] = subject
        message.set_content(body)
        return message

    def _send_sync(self, message: EmailMessage) -> None:
        if self.use_ssl:
            smtp_client: smtplib.SMTP = smtplib.SMTP_SSL(
                host=self.host, port=self.port, timeout=self.timeout
            )
        else:
            smtp_client = smtplib.SMTP(host=self.host, port=self.port, timeout=self.timeout)

        with smtp_client as smtp:
            smtp.ehlo()
            if self.use_starttls:
                smtp.starttls()
                smtp.ehlo()
            if self.username:
                smtp.login(self.username, self.password)
            smtp.send_message(message)

    async def send(self, recipient: str, subject: str, body: str) -> None:
        message = self._build_message(recipient, subject, body)
        try:
            await asyncio.to_thread(self._send_sync, message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.exception("Failed sending email to %s", recipient)
            raise NotificationError(f"Could not deliver email to {recipient}") from exc


@dataclass(frozen=True)
class OutboxMessage:
    recipient: str
    subject: str
    body: str


class OutboxNotifier(INotifier):
    """Keeps messages in memory instead of sending them"""

    def __init__(self):
        self.messages: List[OutboxMessage] = []

    async def send(self, recipient: str, subject: str, body: str) -> None:
        logger.info("Mail delivery disabled; queued message for %s in outbox", recipient)
        self.messages.append(OutboxMessage(recipient, subject, body))
