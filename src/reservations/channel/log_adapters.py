"""Log-only adapters — write each message to the structured log.

Used where no real email or SMS provider is wired in. Every message is
reported as sent.
"""

from uuid import uuid4

import structlog

from reservations.channel.email_port import EmailPort
from reservations.channel.sms_port import SMSPort

logger = structlog.get_logger(__name__)


class LogEmailAdapter(EmailPort):
    def send(self, to: str, subject: str, body: str) -> dict:
        message_id = f"email-{uuid4().hex[:12]}"
        logger.info("Sent email", message_id=message_id, to=to, subject=subject, body=body)
        return {"message_id": message_id, "status": "sent"}


class LogSMSAdapter(SMSPort):
    def send(self, to: str, body: str) -> dict:
        message_id = f"sms-{uuid4().hex[:12]}"
        logger.info("Sent SMS", message_id=message_id, to=to, body=body)
        return {"message_id": message_id, "status": "sent"}
