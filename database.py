import asyncio
import os
import aiosqlite
from contextlib import asynccontextmanager
from typing import Dict, Any, List, Optional
from config import settings
import logging

logger = logging.getLogger(__name__)


class Database:
    _db_path: Optional[str] = None
    _pool: Optional[asyncio.Queue] = None
    _connections: List[aiosqlite.Connection] = []

    @classmethod
    async def initialize(cls, db_path: Optional[str] = None, pool_size: Optional[int] = None):
        """Open the connection pool and create tables if they don't exist"""
        cls._db_path = db_path or settings.DATABASE_URL
        pool_size = pool_size or settings.DB_POOL_SIZE

        # Ensure directory exists for SQLite file
        directory = os.path.dirname(cls._db_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        logger.info(f"Initializing database at: {cls._db_path}")

        cls._pool = asyncio.Queue(maxsize=pool_size)
        cls._connections = []
        try:
            for _ in range(pool_size):
                conn = await aiosqlite.connect(cls._db_path)
                cls._connections.append(conn)
                conn.row_factory = aiosqlite.Row  # Enable dict-like access
                await conn.execute("PRAGMA busy_timeout=5000")
                cls._pool.put_nowait(conn)
            logger.info(f"Connection pool ready ({pool_size} connections)")

            # Configure SQLite for better concurrency
            async with cls.connection() as conn:
                await conn.execute("PRAGMA journal_mode=WAL")
                await conn.execute("PRAGMA synchronous=NORMAL")
                await conn.commit()
                logger.info("SQLite WAL mode enabled")

            await cls._create_tables()
        except Exception:
            logger.error("Database initialization failed, closing opened connections")
            await cls.close()
            raise

    @classmethod
    async def close(cls):
        """Close every pooled connection"""
        for conn in cls._connections:
            await conn.close()
        cls._connections = []
        cls._pool = None
        logger.info("Database connections closed")

    @classmethod
    @asynccontextmanager
    async def connection(cls):
        """Borrow a connection from the pool for the duration of the block"""
        if cls._pool is None:
            raise RuntimeError("Database pool is not initialized")

        pool = cls._pool
        conn = await pool.get()
        try:
            yield conn
        finally:
            # A failed statement must not leave an open transaction on a shared connection
            if conn.in_transaction:
                await conn.rollback()
            pool.put_nowait(conn)

    @classmethod
    async def execute(cls, query: str, params: tuple = None) -> int:
        """Execute a write query, return the number of affected rows"""
        async with cls.connection() as conn:
            cursor = await conn.execute(query, params or ())
            await conn.commit()
            logger.debug(f"Executed: {query[:100]}...")
            return cursor.rowcount

    @classmethod
    async def insert(cls, query: str, params: tuple = None) -> int:
        """Execute an INSERT, return the generated row id"""
        async with cls.connection() as conn:
            cursor = await conn.execute(query, params or ())
            await conn.commit()
            logger.debug(f"Inserted: {query[:100]}...")
            return cursor.lastrowid

    @classmethod
    async def fetch_one(cls, query: str, params: tuple = None) -> Optional[Dict[str, Any]]:
        """Fetch a single row"""
        async with cls.connection() as conn:
            cursor = await conn.execute(query, params or ())
            row = await cursor.fetchone()
            return dict(row) if row else None

    @classmethod
    async def fetch_all(cls, query: str, params: tuple = None) -> List[Dict[str, Any]]:
        """Fetch multiple rows"""
        async with cls.connection() as conn:
            cursor = await conn.execute(query, params or ())
            rows = await cursor.fetchall()
            return [dict(row) for row in rows]

    @classmethod
    async def _create_tables(cls):
        """Create all database tables"""
        tables = [
            """
            CREATE TABLE IF NOT EXISTS books (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                title TEXT NOT NULL,
                content TEXT NOT NULL
            );
            """,
            """
            CREATE TABLE IF NOT EXISTS admin (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                email TEXT UNIQUE NOT NULL,
                password TEXT NOT NULL
            );
            """
        ]

        async with cls.connection() as conn:
            for table_sql in tables:
                await conn.execute(table_sql)

            await conn.commit()
            logger.info("All database tables created successfully")
