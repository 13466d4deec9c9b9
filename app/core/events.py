from ..database import DatabaseManager
from ..logger import get_logger
import asyncio

logger = get_logger()

async def startup_event():
    """Open the connection pool and bootstrap the schema"""
    try:
        db = await DatabaseManager.get_instance()
        await db.initialize()
        logger.info("Database initialized")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise

async def shutdown_event():
    """Close database connections"""
    try:
        db = await DatabaseManager.get_instance()
        async with asyncio.timeout(5.0):
            await db.close()
        logger.info("Database connections closed")
    except asyncio.TimeoutError:
        logger.warning("Shutdown timed out, connections were not closed cleanly")
    except Exception as e:
        logger.error(f"Error during shutdown: {e}")
