"""Persistence gateway contract and its SQLAlchemy implementation."""

from journey.store.interface import PersistenceGateway, UnitOfWorkHandle
from journey.store.sql_store import SqlStore

__all__ = ["PersistenceGateway", "SqlStore", "UnitOfWorkHandle"]
