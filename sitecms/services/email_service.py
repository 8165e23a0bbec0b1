"""
Transactional email providers.

One EmailProvider interface with two implementations, chosen by
configuration:

- ResendProvider: Resend HTTP API (resend SDK)
- SmtpProvider: any SMTP relay (smtplib)
"""

import logging
import smtplib
import ssl
from dataclasses import dataclass, field
from email.message import EmailMessage as MIMEMessage
from email.utils import formataddr, make_msgid
from typing import List, Optional

import resend

from sitecms.core.config import Settings

logger = logging.getLogger(__name__)


class EmailDeliveryError(Exception):
    """Raised when the provider rejects or fails to send a message."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code


@dataclass
class EmailAttachment:
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


@dataclass
class OutgoingEmail:
    to: List[str]
    subject: str
    html: str
    reply_to: Optional[str] = None
    sender_name: Optional[str] = None  # display name; the address is always the configured sender
    attachments: List[EmailAttachment] = field(default_factory=list)


class EmailProvider:
    """Abstract base class for email providers"""

    name = "abstract"

    def __init__(self, from_address: str, from_name: str):
        self.from_address = from_address
        self.from_name = from_name

    def format_sender(self, sender_name: Optional[str] = None) -> str:
        """RFC 5322 From value; the display name is quoted and kept on one line."""
        display_name = " ".join((sender_name or "").split()) or self.from_name
        return formataddr((display_name, self.from_address))

    def send(self, message: OutgoingEmail) -> str:
        """
        Send a message.

        Returns:
            Provider-assigned message id

        Raises:
            EmailDeliveryError: If the provider fails to accept the message
        """
        raise NotImplementedError


class ResendProvider(EmailProvider):
    """
    Service for sending emails via the Resend API.
    """

    name = "resend"

    def __init__(self, api_key: str, from_address: str, from_name: str):
        super().__init__(from_address, from_name)
        resend.api_key = api_key

    def send(self, message: OutgoingEmail) -> str:
        params = {
            "from": self.format_sender(message.sender_name),
            "to": message.to,
            "subject": message.subject,
            "html": message.html,
        }
        if message.reply_to:
            params["reply_to"] = message.reply_to
        if message.attachments:
            params["attachments"] = [
                {"filename": a.filename, "content": list(a.content)}
                for a in message.attachments
            ]

        try:
            response = resend.Emails.send(params)
        except Exception as e:
            code = getattr(e, "code", None) or getattr(e, "error_type", None)
            logger.error(f"Resend send failed: {e}")
            raise EmailDeliveryError(str(e), code=str(code) if code is not None else None) from e

        message_id = response.get("id") if isinstance(response, dict) else getattr(response, "id", None)
        if not message_id:
            logger.error(f"Resend returned no message id: {response}")
            raise EmailDeliveryError(f"Unexpected provider response: {response}")

        logger.info(f"Email sent via Resend to {', '.join(message.to)} (Email ID: {message_id})")
        return message_id


class SmtpProvider(EmailProvider):
    """SMTP relay provider (STARTTLS, or implicit TLS when secure=True)."""

    name = "smtp"

    def __init__(self, host: str, port: int, user: str, password: str,
                 secure: bool, from_address: str, from_name: str, timeout: int = 30):
        super().__init__(from_address, from_name)
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.secure = secure
        self.timeout = timeout

    def build_message(self, message: OutgoingEmail) -> MIMEMessage:
        msg = MIMEMessage()
        msg["Subject"] = message.subject
        msg["From"] = self.format_sender(message.sender_name)
        msg["To"] = ", ".join(message.to)
        if message.reply_to:
            msg["Reply-To"] = message.reply_to
        msg["Message-ID"] = make_msgid(domain=self.from_address.split("@")[-1])
        msg.set_content("This email requires an HTML-capable client.")
        msg.add_alternative(message.html, subtype="html")

        for attachment in message.attachments:
            maintype, _, subtype = attachment.content_type.partition("/")
            msg.add_attachment(
                attachment.content,
                maintype=maintype or "application",
                subtype=subtype or "octet-stream",
                filename=attachment.filename,
            )
        return msg

    def send(self, message: OutgoingEmail) -> str:
        try:
            msg = self.build_message(message)
        except ValueError as e:
            # Header values with line breaks, malformed addresses
            logger.error(f"Could not build SMTP message: {e}")
            raise EmailDeliveryError(str(e), code="InvalidMessage") from e

        context = ssl.create_default_context()

        try:
            if self.secure:
                server = smtplib.SMTP_SSL(self.host, self.port, context=context, timeout=self.timeout)
            else:
                server = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
            with server:
                if not self.secure:
                    server.ehlo()
                    server.starttls(context=context)
                    server.ehlo()
                if self.user:
                    server.login(self.user, self.password)
                server.send_message(msg)
        except smtplib.SMTPResponseException as e:
            logger.error(f"SMTP send failed: {e.smtp_code} {e.smtp_error!r}")
            detail = e.smtp_error.decode(errors="replace") if isinstance(e.smtp_error, bytes) else str(e.smtp_error)
            raise EmailDeliveryError(detail, code=str(e.smtp_code)) from e
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"SMTP send failed: {e}")
            raise EmailDeliveryError(str(e), code=e.__class__.__name__) from e

        logger.info(f"Email sent via SMTP to {msg['To']} (Message-ID: {msg['Message-ID']})")
        return msg["Message-ID"]


def build_email_provider(settings: Settings) -> Optional[EmailProvider]:
    """
    Pick the provider from EMAIL_PROVIDER, or from whichever credentials are set.

    Returns None when nothing is configured; callers answer 503 in that case.
    """
    choice = settings.EMAIL_PROVIDER
    if not choice:
        if settings.RESEND_API_KEY:
            choice = "resend"
        elif settings.SMTP_HOST and settings.SMTP_USER:
            choice = "smtp"
        else:
            logger.warning("No email provider configured; contact and career endpoints will return 503")
            return None

    if choice == "resend":
        if not settings.RESEND_API_KEY:
            logger.warning("EMAIL_PROVIDER=resend but RESEND_API_KEY is empty")
            return None
        return ResendProvider(settings.RESEND_API_KEY, settings.EMAIL_FROM_ADDRESS, settings.EMAIL_FROM_NAME)

    if choice == "smtp":
        if not settings.SMTP_HOST:
            logger.warning("EMAIL_PROVIDER=smtp but SMTP_HOST is empty")
            return None
        return SmtpProvider(
            host=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
            user=settings.SMTP_USER,
            password=settings.SMTP_PASSWORD,
            secure=settings.SMTP_SECURE,
            # SMTP relays usually only accept the authenticated account as sender
            from_address=settings.SMTP_USER or settings.EMAIL_FROM_ADDRESS,
            from_name=settings.EMAIL_FROM_NAME,
        )

    logger.warning(f"Unknown EMAIL_PROVIDER '{choice}'; email disabled")
    return None
