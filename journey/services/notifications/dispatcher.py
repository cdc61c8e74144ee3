import asyncio
from typing import Awaitable, Callable, Set
from uuid import UUID

from journey.core.errors import NotificationFailedError
from journey.core.logger import logger
from journey.services.notifications.interface import Notifier


class NotificationDispatcher:
    """
    Runs notifier calls as detached asyncio tasks.

    Callers get the task back but never need to await it. A failed send is
    logged once as a NotificationFailedError and dropped, there is no retry.
    Live tasks are referenced here until they finish so they are not
    garbage collected mid-send.
    """

    def __init__(self, notifier: Notifier):
        self.notifier = notifier
        self._tasks: Set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def dispatch_owner_confirmation(self, trip_id: UUID) -> asyncio.Task:
        return self._spawn("owner_confirmation", trip_id, self.notifier.notify_owner_confirmation)

    def dispatch_participants_invited(self, trip_id: UUID) -> asyncio.Task:
        return self._spawn("participants_invited", trip_id, self.notifier.notify_participants_invited)

    def _spawn(
        self,
        kind: str,
        trip_id: UUID,
        send: Callable[[UUID], Awaitable[None]],
    ) -> asyncio.Task:
        task = asyncio.create_task(self._run(kind, trip_id, send), name=f"notify:{kind}:{trip_id}")
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run(self, kind: str, trip_id: UUID, send: Callable[[UUID], Awaitable[None]]) -> None:
        try:
            await send(trip_id)
        except asyncio.CancelledError:
            logger.warning(f"Notification {kind} for trip {trip_id} cancelled")
            raise
        except Exception as e:
            failure = NotificationFailedError(f"failed to send {kind} email for trip {trip_id}: {e}")
            logger.error(failure.message)
            return
        logger.info(f"Notification {kind} sent for trip {trip_id}")

    async def drain(self) -> None:
        """Wait for in-flight notifications, e.g. on shutdown."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
