import asyncpg
import asyncio
from ..config import database
from ..logger import get_logger

logger = get_logger()

SCHEMA_STATEMENTS = (
    '''
    CREATE TABLE IF NOT EXISTS games (
        id SERIAL PRIMARY KEY,
        title VARCHAR(50) NOT NULL,
        genre VARCHAR(20) NOT NULL
    )
    ''',
    '''
    CREATE TABLE IF NOT EXISTS players (
        id SERIAL PRIMARY KEY,
        name VARCHAR(15) NOT NULL,
        join_date TIMESTAMPTZ NOT NULL DEFAULT NOW()
    )
    ''',
    '''
    CREATE TABLE IF NOT EXISTS scores (
        id SERIAL PRIMARY KEY,
        player_id INTEGER NOT NULL REFERENCES players(id) ON DELETE CASCADE,
        game_id INTEGER NOT NULL REFERENCES games(id) ON DELETE CASCADE,
        score INTEGER NOT NULL
    )
    ''',
    'CREATE INDEX IF NOT EXISTS idx_scores_player ON scores(player_id)',
    'CREATE INDEX IF NOT EXISTS idx_scores_game ON scores(game_id)',
)

class DatabaseConnection:
    def __init__(self):
        self.pool = None
        self._initialized = False
        self._init_lock = asyncio.Lock()

    async def initialize(self):
        """Create the connection pool and make sure the tables exist"""
        if self._initialized:
            return

        async with self._init_lock:
            if self._initialized:  # Double check after acquiring lock
                return

            try:
                self.pool = await asyncpg.create_pool(
                    host=database.HOST,
                    port=database.PORT,
                    database=database.DATABASE,
                    user=database.USER,
                    password=database.PASSWORD,
                    min_size=database.MIN_POOL_SIZE,
                    max_size=database.MAX_POOL_SIZE,
                    command_timeout=database.COMMAND_TIMEOUT,
                    max_inactive_connection_lifetime=300.0,
                    setup=self._setup_connection
                )

                async with self.pool.acquire() as conn:
                    for statement in SCHEMA_STATEMENTS:
                        await conn.execute(statement)

                self._initialized = True
                logger.info("Database connection initialized successfully")
            except Exception as e:
                logger.error(f"Failed to initialize database connection: {e}")
                await self.close()
                raise

    async def _setup_connection(self, connection):
        """Setup connection with proper settings"""
        await connection.execute('SET statement_timeout = 30000')
        await connection.execute('SET idle_in_transaction_session_timeout = 30000')
        await connection.execute('SET lock_timeout = 10000')

    async def close(self):
        """Close database connections"""
        if self.pool:
            await self.pool.close()
            self.pool = None
        self._initialized = False
