"""One-shot database reachability check run after the application starts.

The outcome is only logged: a failed check never stops the process or
affects request handling, and it is never retried.
"""
import asyncio
import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from qcheck.db.errors import storage_error_details
from qcheck.core.config import settings

logger = logging.getLogger(__name__)

DIAGNOSTIC_QUERY = text(
    "SELECT 1 AS test_value, CURRENT_TIMESTAMP AS server_time, version() AS db_version"
)


def check_connection(engine: Engine) -> bool:
    """Open a connection, run the diagnostic query and log what it returns."""
    logger.info("=== Database connection check started ===")
    try:
        with engine.connect() as conn:
            logger.info("Connection acquired")
            row = conn.execute(DIAGNOSTIC_QUERY).mappings().first()
            if row is None:
                logger.error("Diagnostic query returned no row")
                return False
            logger.info("Diagnostic query succeeded")
            logger.info("  - test value: %s", row["test_value"])
            logger.info("  - server time: %s", row["server_time"])
            logger.info("  - server version: %s", row["db_version"])
            return True
    except SQLAlchemyError as e:
        code, sqlstate = storage_error_details(e)
        logger.error("Database connection failed: %s", getattr(e, "orig", None) or e)
        logger.error("  - error code: %s", code)
        logger.error("  - SQL state: %s", sqlstate)
        return False


def run_startup_diagnostic(engine: Engine | None = None, database_name: str | None = None) -> bool:
    if engine is None:
        from qcheck.db.session import engine
    database_name = database_name or settings.db_name
    logger.info("Application ready - running database connection check")

    ok = check_connection(engine)
    if ok:
        logger.info("Database connection check passed")
    else:
        logger.warning("Database connection failed - check the database settings:")
        logger.warning("  1. the database server is running and reachable")
        logger.warning("  2. DATABASE_URL (host, port, credentials) is correct")
        logger.warning("  3. the database '%s' exists", database_name)
        logger.warning("  4. the user has privileges on that database")
    logger.info("=== Database connection check finished ===")
    return ok


async def startup_diagnostic_task(delay: float = 1.0) -> bool:
    # Let the server start accepting connections first
    await asyncio.sleep(delay)
    return await asyncio.to_thread(run_startup_diagnostic)
