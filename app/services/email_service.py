"""
SMTP Email Service.

Sends mail through the SMTP relay configured by the MAIL_* settings,
with authentication and STARTTLS.
"""

import logging
import smtplib
from email.message import EmailMessage
from typing import Optional
from app.core.config import settings

logger = logging.getLogger(__name__)


class EmailService:
    """
    Service for sending emails over SMTP.

    A connection is opened per message; nothing is held between sends.
    """

    def __init__(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        debug: Optional[bool] = None,
        timeout: float = 30.0
    ):
        """Read connection details, falling back to settings"""
        self.host = host if host is not None else settings.MAIL_HOST
        self.port = port if port is not None else settings.MAIL_PORT
        self.username = username if username is not None else settings.MAIL_USERNAME
        self.password = password if password is not None else settings.MAIL_PASSWORD
        self.debug = debug if debug is not None else settings.MAIL_DEBUG
        self.timeout = timeout

    def build_message(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        html_body: Optional[str] = None
    ) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.username
        message["To"] = to_email
        message["Subject"] = subject
        message.set_content(text_body)
        if html_body:
            message.add_alternative(html_body, subtype="html")
        return message

    def send_email(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        html_body: Optional[str] = None
    ) -> bool:
        """
        Send an email.

        Args:
            to_email: Recipient email address
            subject: Subject line
            text_body: Plain-text body
            html_body: Optional HTML alternative

        Returns:
            bool: True if email sent successfully, False otherwise
        """
        message = self.build_message(to_email, subject, text_body, html_body)

        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
                if self.debug:
                    smtp.set_debuglevel(1)
                smtp.ehlo()
                smtp.starttls()
                smtp.ehlo()
                if self.username and self.password:
                    smtp.login(self.username, self.password)
                smtp.send_message(message)

            logger.info(f"Email '{subject}' sent to {to_email}")
            return True

        except smtplib.SMTPAuthenticationError as e:
            logger.error(f"SMTP authentication failed for {self.username}: {e.smtp_code} {e.smtp_error!r}")
            return False

        except smtplib.SMTPRecipientsRefused as e:
            logger.error(f"Recipient refused: {list(e.recipients)}")
            return False

        except smtplib.SMTPException as e:
            logger.error(f"SMTP error sending to {to_email}: {str(e)}")
            return False

        except OSError as e:
            logger.error(f"Could not reach SMTP server {self.host}:{self.port}: {str(e)}")
            return False


# Global instance
email_service = EmailService()
