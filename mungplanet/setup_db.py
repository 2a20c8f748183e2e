"""
One-time schema bootstrap.

    python -m mungplanet.setup_db

Creates ``posts`` and ``comments`` when they are missing and leaves existing
tables untouched, so running it twice is harmless.
"""

import asyncio
import logging
from sqlalchemy import inspect
from .models import Base, engine

logger = logging.getLogger(__name__)


async def ensure_schema(bind=engine) -> list[str]:
    """Create every missing table and return the names that were created."""
    created = []
    async with bind.begin() as conn:
        existing = set(await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names()))
        for table in Base.metadata.sorted_tables:
            if table.name in existing:
                continue
            await conn.run_sync(table.create, checkfirst=True)
            created.append(table.name)
            logger.info({'msg': 'table_created', 'table': table.name})
    return created


async def main():
    try:
        created = await ensure_schema()
        if not created:
            logger.info({'msg': 'schema_up_to_date'})
    finally:
        await engine.dispose()


if __name__ == '__main__':
    from pythonjsonlogger import jsonlogger
    handler = logging.StreamHandler()
    handler.setFormatter(jsonlogger.JsonFormatter('%(asctime)s %(levelname)s %(name)s %(message)s'))
    logging.root.addHandler(handler)
    logging.root.setLevel(logging.INFO)
    asyncio.run(main())
