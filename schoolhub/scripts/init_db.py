"""
Create every table and report which ones exist afterwards.

Usage:
  python -m schoolhub.scripts.init_db
"""

import asyncio

from sqlalchemy import inspect

from schoolhub.db.session import create_all_tables, engine


async def run() -> None:
    await create_all_tables()
    async with engine.connect() as conn:
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
    print(f"{len(tables)} tables:")
    for name in sorted(tables):
        print(f"  {name}")
    await engine.dispose()


def main() -> None:
    asyncio.run(run())


if __name__ == "__main__":
    main()
