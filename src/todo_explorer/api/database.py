"""Database connection service for FastAPI."""

import duckdb
from typing import Optional
from pathlib import Path

from todo_explorer.api.config import get_settings
from todo_explorer.config.logging_config import get_logger

logger = get_logger("api.database")

TODOS_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS todos (
        id VARCHAR PRIMARY KEY,
        title VARCHAR NOT NULL,
        description VARCHAR,
        completed BOOLEAN NOT NULL DEFAULT FALSE,
        created_at TIMESTAMP NOT NULL,
        updated_at TIMESTAMP NOT NULL
    )
"""


class DatabaseService:
    """Manages the DuckDB connection used by the API."""

    def __init__(self, db_path: Optional[Path] = None):
        """Initialize database service.

        Args:
            db_path: Path to database file, or ":memory:".
        """
        settings = get_settings()
        self.db_path = db_path or settings.database_path
        self._connection: Optional[duckdb.DuckDBPyConnection] = None

    def connect(self) -> duckdb.DuckDBPyConnection:
        """Get or create database connection, creating the schema if needed."""
        if self._connection is None:
            if str(self.db_path) != ":memory:":
                Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            self._connection = duckdb.connect(str(self.db_path))
            self._connection.execute(TODOS_TABLE_SQL)
            logger.info(f"Connected to database: {self.db_path}")
        return self._connection

    def execute(self, query: str, params: Optional[list] = None):
        """Execute a query and return the cursor."""
        conn = self.connect()
        if params:
            return conn.execute(query, params)
        return conn.execute(query)

    def fetch_one(self, query: str, params: Optional[list] = None):
        """Execute query and fetch one result."""
        return self.execute(query, params).fetchone()

    def fetch_all(self, query: str, params: Optional[list] = None):
        """Execute query and fetch all results."""
        return self.execute(query, params).fetchall()

    def close(self) -> None:
        """Close the database connection."""
        if self._connection:
            self._connection.close()
            self._connection = None


# Global database instance
_db_service: Optional[DatabaseService] = None


def get_db() -> DatabaseService:
    """Get global database service instance."""
    global _db_service
    if _db_service is None:
        _db_service = DatabaseService()
    return _db_service


def close_db() -> None:
    """Close the global database connection."""
    global _db_service
    if _db_service is not None:
        _db_service.close()
        _db_service = None
