"""
Health probe functions for dependency checks.

Each probe function:
- Returns bool (True = healthy, False = unhealthy)
- Handles exceptions gracefully
- Includes appropriate timeouts
"""

import asyncio

from sqlalchemy import text

from app.core.database import async_session_maker
from app.core.logging_config import get_logger


logger = get_logger(__name__)


async def check_database(timeout_seconds: float = 2.0) -> bool:
    """
    Check database connectivity.

    Executes a simple SELECT 1 query to verify the database is reachable
    and responding. Includes timeout to prevent hanging on unreachable DB.

    Args:
        timeout_seconds: Maximum time to wait for response (default: 2.0)

    Returns:
        True if database is reachable and healthy, False otherwise

    Example:
        >>> is_healthy = await check_database()
        >>> if not is_healthy:
        ...     raise Exception("Database unavailable")
    """
    try:
        async with asyncio.timeout(timeout_seconds):
            async with async_session_maker() as session:
                result = await session.execute(text("SELECT 1"))
                result.scalar()
                return True

    except TimeoutError:
        logger.warning("Database probe timed out", extra={"timeout_seconds": timeout_seconds})
        return False
    except Exception as exc:
        # Any other error (connection failed, query error, etc.)
        logger.warning(f"Database probe failed: {exc}")
        return False
