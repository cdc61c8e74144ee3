import asyncio
import smtplib
from email.mime.text import MIMEText
from email.utils import formataddr
from typing import List, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import async_sessionmaker

from journey.core.config import Settings, settings as default_settings
from journey.core.errors import NotificationFailedError
from journey.core.logger import logger
from journey.services.notifications.interface import Notifier
from journey.store.sql_store import SqlStore


def generate_trip_confirm_link(base_url: str, trip_id: UUID) -> str:
    return f"{base_url}/trips/{trip_id}/confirm"


def generate_participant_confirm_link(base_url: str, participant_id: UUID) -> str:
    return f"{base_url}/participants/{participant_id}/confirm"


class SmtpNotifier(Notifier):
    """
    Plain-text trip e-mails over SMTP.

    Runs on the dispatcher's background task, after the request session is
    closed, so it opens its own session to read the trip. smtplib blocks,
    the actual send happens in a worker thread.
    """

    def __init__(self, session_factory: async_sessionmaker, settings: Settings = default_settings):
        self.session_factory = session_factory
        self.settings = settings

    async def notify_owner_confirmation(self, trip_id: UUID) -> None:
        async with self.session_factory() as db:
            trip = await SqlStore(db).get_trip(trip_id)

        body = (
            f"Hello, {trip.owner_name}!\n\n"
            f"Your trip to {trip.destination} starting on {trip.starts_at.date().isoformat()} "
            f"needs to be confirmed.\n"
            f"Open the link below to confirm it:\n\n"
            f"{generate_trip_confirm_link(self.settings.FRONTEND_BASE_URL, trip.id)}\n"
        )
        message = self._build_message(trip.owner_email, "Confirm your trip", body)
        await asyncio.to_thread(self._send, [(trip.owner_email, message)])

    async def notify_participants_invited(self, trip_id: UUID) -> None:
        async with self.session_factory() as db:
            store = SqlStore(db)
            trip = await store.get_trip(trip_id)
            participants = [p for p in await store.get_participants(trip_id) if not p.is_owner]

        if not participants:
            logger.info(f"Trip {trip_id} has no participants to notify")
            return

        outgoing = []
        for participant in participants:
            body = (
                f"Hello!\n\n"
                f"You have been invited to a trip to {trip.destination} "
                f"starting on {trip.starts_at.date().isoformat()}.\n"
                f"Open the link below to confirm your attendance:\n\n"
                f"{generate_participant_confirm_link(self.settings.FRONTEND_BASE_URL, participant.id)}\n"
            )
            outgoing.append(
                (participant.email, self._build_message(participant.email, "Confirm your trip", body))
            )
        await asyncio.to_thread(self._send, outgoing)

    def _build_message(self, to_email: str, subject: str, body: str) -> MIMEText:
        msg = MIMEText(body)
        msg["Subject"] = subject
        msg["From"] = formataddr((self.settings.APP_NAME, self.settings.MAIL_FROM))
        msg["To"] = to_email
        return msg

    def _send(self, outgoing: List[Tuple[str, MIMEText]]) -> None:
        smtp_class = smtplib.SMTP_SSL if self.settings.SMTP_USE_SSL else smtplib.SMTP
        try:
            with smtp_class(self.settings.SMTP_HOST, self.settings.SMTP_PORT) as server:
                if self.settings.SMTP_USER:
                    server.login(self.settings.SMTP_USER, self.settings.SMTP_PASSWORD)
                for to_email, message in outgoing:
                    server.sendmail(self.settings.MAIL_FROM, [to_email], message.as_string())
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationFailedError(f"smtp: failed to send email: {e}") from e
