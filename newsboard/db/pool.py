# newsboard/db/pool.py
import asyncpg
from typing import Optional
from newsboard.config import DB_DSN, DB_POOL_MAX, DB_POOL_MIN

_pool: Optional[asyncpg.pool.Pool] = None

async def connect_db():
    global _pool
    if _pool is None:
        if not DB_DSN:
            raise RuntimeError("DATABASE_URL is not configured")
        _pool = await asyncpg.create_pool(dsn=DB_DSN, min_size=DB_POOL_MIN, max_size=DB_POOL_MAX)

async def close_db():
    global _pool
    if _pool is not None:
        await _pool.close()
        _pool = None

def pool():
    if _pool is None:
        raise RuntimeError("Database pool is not initialized. Call connect_db() first.")
    return _pool
