from contextlib import asynccontextmanager
from typing import AsyncIterator

from journey.core.errors import JourneyError, TransactionFailedError
from journey.core.logger import logger
from journey.store.interface import PersistenceGateway, UnitOfWorkHandle


@asynccontextmanager
async def unit_of_work(gateway: PersistenceGateway, action: str) -> AsyncIterator[UnitOfWorkHandle]:
    """
    begin / commit / rollback scope around a batch of gateway writes.

    Rollback runs on every exit that is not a successful commit: domain
    errors, gateway errors, commit failures and task cancellation alike.
    Gateway errors come out as TransactionFailedError.
    """
    try:
        handle = await gateway.begin_unit_of_work()
    except Exception as e:
        raise TransactionFailedError(f"failed to begin tx for {action}: {e}") from e

    committed = False
    try:
        try:
            yield handle
        except JourneyError:
            raise
        except Exception as e:
            raise TransactionFailedError(f"failed to {action}: {e}") from e

        try:
            await gateway.commit(handle)
        except Exception as e:
            raise TransactionFailedError(f"failed to commit tx for {action}: {e}") from e
        committed = True
    finally:
        if not committed:
            logger.warning(f"Rolling back unit of work for {action}")
            try:
                await gateway.rollback(handle)
            except Exception as e:
                # The exception already in flight is the one the caller sees
                logger.error(f"Rollback failed for {action}: {e}")
