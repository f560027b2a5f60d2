#!/usr/bin/env python
"""
Create the demo tenants and users for development.

Usage:
    python scripts/seed.py [--create-tables]
"""

import argparse
import asyncio

from tenantnotes.config import settings
from tenantnotes.core.database import async_engine, async_session_factory, create_tables
from tenantnotes.core.logging import configure_logging
from tenantnotes.seed import seed_demo_data


async def main(with_tables: bool) -> None:
    """Run the seeding."""
    if with_tables:
        await create_tables()

    async with async_session_factory() as session:
        created = await seed_demo_data(session)

    await async_engine.dispose()
    print(f"Created {created['tenants']} tenant(s) and {created['users']} user(s)")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed database with demo data")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before seeding",
    )
    args = parser.parse_args()

    configure_logging(settings)
    asyncio.run(main(args.create_tables))
