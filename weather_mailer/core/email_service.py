"""Email service for sending emails via AWS SES."""

import asyncio
import logging
import re
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from weather_mailer.core.config import Settings, get_settings
from weather_mailer.core.exceptions import EmailDeliveryException

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<[^>]*>")


class EmailService:
    """Service for sending the report from SENDER_EMAIL to RECIPIENT_EMAIL via AWS SES."""

    def __init__(self, settings: Optional[Settings] = None, ses_client: Any = None):
        self.settings = settings or get_settings()
        self._ses_client = ses_client

    def _get_ses_client(self):
        """Get boto3 SES client."""
        if self._ses_client is None:
            self._ses_client = boto3.client(
                "ses",
                region_name=self.settings.ses_region,
                aws_access_key_id=self.settings.AWS_ACCESS_KEY_ID,
                aws_secret_access_key=self.settings.AWS_SECRET_ACCESS_KEY,
            )
        return self._ses_client

    def build_params(self, subject: str, html_body: str, text_body: Optional[str] = None) -> dict:
        """
        Build SES send_email parameters.

        Raises:
            EmailDeliveryException: if subject, body or addresses are missing
        """
        if not subject or not isinstance(subject, str):
            raise EmailDeliveryException("Subject must be a non-empty string")
        if not html_body or not isinstance(html_body, str):
            raise EmailDeliveryException("HTML body must be a non-empty string")

        sender = self.settings.SENDER_EMAIL
        recipient = self.settings.RECIPIENT_EMAIL
        if not sender or not recipient:
            raise EmailDeliveryException("Both SENDER_EMAIL and RECIPIENT_EMAIL are required")

        return {
            "Source": sender,
            "Destination": {
                "ToAddresses": [recipient]
            },
            "Message": {
                "Subject": {
                    "Data": subject,
                    "Charset": "UTF-8"
                },
                "Body": {
                    "Html": {
                        "Data": html_body,
                        "Charset": "UTF-8"
                    },
                    "Text": {
                        "Data": text_body or _TAG_RE.sub("", html_body),
                        "Charset": "UTF-8"
                    }
                }
            }
        }

    def _send_email_sync(self, params: dict) -> str:
        """
        Synchronous SES call.

        Returns:
            SES MessageId
        """
        ses_client = self._get_ses_client()
        try:
            response = ses_client.send_email(**params)
        except ClientError as e:
            error_code = e.response["Error"]["Code"]
            error_message = e.response["Error"]["Message"]
            # MessageRejected usually means an unverified address (SES sandbox mode)
            raise EmailDeliveryException(f"Failed to send email: {error_code} - {error_message}") from e
        except BotoCoreError as e:
            raise EmailDeliveryException(f"Failed to send email: {str(e)}") from e

        return response.get("MessageId")

    async def send_email(self, subject: str, html_body: str, text_body: Optional[str] = None) -> str:
        """
        Send an email via AWS SES.

        Args:
            subject: Email subject
            html_body: HTML version of email body
            text_body: Plain text version; derived from the HTML when omitted

        Returns:
            SES MessageId

        Raises:
            EmailDeliveryException: if the message is invalid or SES rejects it
        """
        params = self.build_params(subject, html_body, text_body)
        logger.info(f"Attempting to send email with subject: {subject}")

        # Run the blocking boto3 call in a thread pool to avoid blocking the event loop
        try:
            message_id = await asyncio.to_thread(self._send_email_sync, params)
        except EmailDeliveryException as e:
            logger.error(f"SES error: {e.detail}")
            raise

        logger.info(f"Email sent successfully. MessageId: {message_id}")
        return message_id
