#!/usr/bin/env python3
"""
Create (or recreate) the users table
"""
import argparse
import asyncio
import logging
import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'apps', 'api'))

from accounts.core.database import async_engine, drop_db, init_db
from accounts.core.logging_config import configure_logging

logger = logging.getLogger("init_db")


async def main(reset: bool):
    try:
        if reset:
            await drop_db()
            logger.info("Dropped existing tables")
        await init_db()
        logger.info("Tables created")
    finally:
        await async_engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--reset", action="store_true", help="drop tables first (development only)")
    args = parser.parse_args()
    
    configure_logging()
    asyncio.run(main(args.reset))
