from pydantic_settings import BaseSettings
import os

class DatabaseConfig(BaseSettings):
    HOST: str = os.getenv('POSTGRES_HOST', 'localhost')
    PORT: int = int(os.getenv('POSTGRES_PORT', 5432))
    DATABASE: str = os.getenv('POSTGRES_DB', 'games')
    USER: str = os.getenv('POSTGRES_USER', 'postgres')
    PASSWORD: str = os.getenv('POSTGRES_PASSWORD', 'postgres')
    MIN_POOL_SIZE: int = int(os.getenv('POSTGRES_MIN_POOL_SIZE', 2))
    MAX_POOL_SIZE: int = int(os.getenv('POSTGRES_MAX_POOL_SIZE', 20))
    COMMAND_TIMEOUT: float = float(os.getenv('POSTGRES_COMMAND_TIMEOUT', 10))

database = DatabaseConfig()

class AppConfig(BaseSettings):
    HOST: str = os.getenv('APP_HOST', '0.0.0.0')
    PORT: int = int(os.getenv('APP_PORT', 1338))
    LOG_LEVEL: str = os.getenv('APP_LOG_LEVEL', 'INFO')
    # Row cap for the "top" reports
    REPORT_LIMIT: int = 3
    # Trailing window for /players/recent
    RECENT_DAYS: int = 30

settings = AppConfig()
