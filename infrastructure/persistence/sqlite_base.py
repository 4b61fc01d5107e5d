"""Shared aiosqlite plumbing for the catalog repositories."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator

import aiosqlite

from domain.exceptions import StoreUnavailable

logger = logging.getLogger(__name__)


class SQLiteRepository:
    """
    Base for SQLite-backed repositories.

    Each operation opens its own connection, so there is no shared
    connection state between concurrent requests. Per-user atomicity
    comes from single statements and per-connection transactions.
    """

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path
        os.makedirs(
            os.path.dirname(self.db_path) if os.path.dirname(self.db_path) else ".",
            exist_ok=True,
        )

    @asynccontextmanager
    async def _connect(self) -> AsyncIterator[aiosqlite.Connection]:
        """
        Open a connection with Row access and foreign keys enabled.

        IntegrityError is left for the caller to interpret; any other
        sqlite failure becomes StoreUnavailable.
        """
        try:
            async with aiosqlite.connect(self.db_path) as db:
                db.row_factory = aiosqlite.Row
                await db.execute("PRAGMA foreign_keys = ON")
                yield db
        except aiosqlite.IntegrityError:
            raise
        except aiosqlite.Error as e:
            logger.error("SQLite error on %s: %s", self.db_path, e, exc_info=True)
            raise StoreUnavailable() from e

    async def ping(self) -> bool:
        """Cheap liveness probe for the health endpoint."""
        try:
            async with self._connect() as db:
                async with db.execute("SELECT 1") as cursor:
                    return await cursor.fetchone() is not None
        except StoreUnavailable:
            return False
