from typing import Optional
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from journey.core.database import SessionLocal, get_db
from journey.services.notifications.dispatcher import NotificationDispatcher
from journey.services.notifications.smtp_notifier import SmtpNotifier
from journey.store.interface import PersistenceGateway
from journey.store.sql_store import SqlStore

_dispatcher: Optional[NotificationDispatcher] = None


async def get_gateway(db: AsyncSession = Depends(get_db)) -> PersistenceGateway:
    return SqlStore(db)


def get_dispatcher() -> NotificationDispatcher:
    """Process-wide dispatcher; the SMTP notifier opens its own sessions."""
    global _dispatcher

    if _dispatcher is None:
        _dispatcher = NotificationDispatcher(SmtpNotifier(SessionLocal))

    return _dispatcher


async def drain_dispatcher():
    """Let in-flight e-mails finish on application shutdown."""
    if _dispatcher is not None:
        await _dispatcher.drain()
