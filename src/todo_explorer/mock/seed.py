#!/usr/bin/env python3
"""Seed the todos table with sample data.

Usage:
    todo-seed                 # insert samples if the table is empty
    todo-seed --reset         # clear the table first
    todo-seed --random 40     # add 40 generated todos as well
"""

import argparse
import sys
from datetime import datetime
from functools import partial
from pathlib import Path
from typing import List, Optional

import numpy as np

from todo_explorer.api.database import DatabaseService
from todo_explorer.api.repositories.todo_repository import TodoRepository
from todo_explorer.config import config, setup_logging
from todo_explorer.config.logging_config import get_logger
from todo_explorer.mock.generators import generate_mock_data, generate_todo

logger = get_logger("mock.seed")

SAMPLE_TODOS = [
    {
        "title": "Complete project setup",
        "description": "Set up the development environment and initialize the project",
        "completed": True,
    },
    {
        "title": "Implement user authentication",
        "description": "Add login and registration functionality",
        "completed": False,
    },
    {
        "title": "Create API endpoints",
        "description": "Build RESTful API endpoints for CRUD operations",
        "completed": False,
    },
    {
        "title": "Write unit tests",
        "description": "Add comprehensive test coverage for the application",
        "completed": False,
    },
    {
        "title": "Deploy to production",
        "description": "Set up CI/CD pipeline and deploy the application",
        "completed": False,
    },
]


def seed_todos(
    db: DatabaseService,
    reset: bool = False,
    random_count: int = 0,
    seed: Optional[int] = 42,
) -> int:
    """Insert sample todos.

    Samples are only inserted into an empty table; ``reset`` deletes existing
    rows first. ``random_count`` generated todos are added in either case.

    Returns:
        Number of rows in the table afterwards.
    """
    repository = TodoRepository(db)

    if reset:
        db.execute("DELETE FROM todos")
        logger.info("Cleared existing todos")

    if repository.count() == 0:
        for todo in SAMPLE_TODOS:
            repository.create(**todo)
    else:
        logger.info("Todos table is not empty, skipping samples")

    if random_count:
        rng = np.random.default_rng(seed)
        for todo in generate_mock_data(partial(generate_todo, rng), count=random_count):
            repository.create(
                title=todo["title"],
                description=todo["description"],
                completed=todo["completed"],
                created_at=datetime.fromisoformat(todo["createdAt"]),
            )
        logger.info(f"Added {random_count} generated todos")

    count = repository.count()
    logger.info(f"Seeded {count} todos")
    return count


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for ``todo-seed``."""
    parser = argparse.ArgumentParser(description="Seed the todo database")
    parser.add_argument("--db", type=Path, default=config.database.path, help="DuckDB file")
    parser.add_argument("--reset", action="store_true", help="Delete existing todos first")
    parser.add_argument("--random", type=int, default=0, help="Extra generated todos")
    args = parser.parse_args(argv)

    setup_logging(config.app.log_level)

    db = DatabaseService(args.db)
    try:
        count = seed_todos(db, reset=args.reset, random_count=args.random)
    except Exception as e:
        logger.error(f"Error during database seeding: {e}")
        return 1
    finally:
        db.close()

    print(f"Seeded {count} todos into {args.db}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
