#!/usr/bin/env python3
"""Create (or with --reset, recreate) the Bookwright tables."""
import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import inspect
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine

import app.models  # noqa: F401
from app.config import settings
from app.database import Base, drop_db, engine, init_db


async def existing_tables(bind: AsyncEngine) -> set[str]:
    """Names of the tables currently present behind ``bind``."""
    async with bind.connect() as conn:
        names = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
    return set(names)


async def bootstrap(bind: AsyncEngine, reset: bool = False) -> dict[str, str]:
    """Create every table on ``bind``.

    Returns:
        dict: table name -> "created" or "exists"
    """
    before = set() if reset else await existing_tables(bind)
    if reset:
        await drop_db(bind)
    await init_db(bind)
    return {
        table.name: "exists" if table.name in before else "created"
        for table in Base.metadata.sorted_tables
    }


async def main():
    parser = argparse.ArgumentParser(description="Bookwright database bootstrap")
    parser.add_argument("--reset", action="store_true", help="Drop every table before creating them")
    args = parser.parse_args()

    print(f"Database: {make_url(settings.database_url).render_as_string(hide_password=True)}")
    if args.reset:
        print("Dropping existing tables...")

    states = await bootstrap(engine, reset=args.reset)
    await engine.dispose()

    print("\nTables:")
    for name, state in states.items():
        print(f"  - {name:<14} {state}")


if __name__ == "__main__":
    asyncio.run(main())
