from .base import DatabaseManager, get_db

__all__ = ["DatabaseManager", "get_db"]
