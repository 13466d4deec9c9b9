import asyncio
from .connection import DatabaseConnection
from .game_manager import GameManager
from .player_manager import PlayerManager
from ..logger import get_logger

logger = get_logger()

class DatabaseManager:
    _instance = None
    _lock = asyncio.Lock()

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(DatabaseManager, cls).__new__(cls)
            cls._instance.db_connection = DatabaseConnection()
            cls._instance.games = GameManager(cls._instance.db_connection)
            cls._instance.players = PlayerManager(cls._instance.db_connection)
            cls._instance._initialized = False
        return cls._instance

    @classmethod
    async def get_instance(cls):
        """Get the singleton instance of DatabaseManager"""
        if cls._instance is None:
            async with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    async def initialize(self):
        """Open the connection pool and bootstrap the schema"""
        if self._initialized:
            return

        try:
            await self.db_connection.initialize()
            self._initialized = True
            logger.info("Database manager initialized successfully")
        except Exception as e:
            logger.error(f"Failed to initialize database manager: {e}")
            await self.close()
            raise

    async def close(self):
        """Close the pool and reset the singleton"""
        if self.db_connection:
            await self.db_connection.close()
        self._initialized = False
        DatabaseManager._instance = None

    @property
    def initialized(self) -> bool:
        return self._initialized


async def get_db() -> DatabaseManager:
    """FastAPI dependency returning the initialized database manager"""
    db = await DatabaseManager.get_instance()
    if not db.initialized:
        await db.initialize()
    return db
