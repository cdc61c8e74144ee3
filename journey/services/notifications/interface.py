from abc import ABC, abstractmethod
from uuid import UUID


class Notifier(ABC):
    """Sends trip e-mails. Implementations may raise; the dispatcher absorbs it."""

    @abstractmethod
    async def notify_owner_confirmation(self, trip_id: UUID) -> None: ...

    @abstractmethod
    async def notify_participants_invited(self, trip_id: UUID) -> None: ...
