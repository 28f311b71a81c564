#!/usr/bin/env python3
"""Mock data generators for local development.

Every generator takes a numpy ``Generator`` so a seed reproduces the same
records. Wrap one with ``functools.partial`` to get the zero-argument
callable that ``generate_mock_data`` expects:

    rng = np.random.default_rng(42)
    users = generate_mock_data_with_ids(partial(generate_user, rng), count=10)
"""

import argparse
import json
import sys
from datetime import datetime, timedelta
from functools import partial
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from todo_explorer.config.settings import PROJECT_ROOT
from todo_explorer.config.logging_config import get_logger

logger = get_logger("mock.generators")

MockGenerator = Callable[[], Dict[str, Any]]

DEFAULT_OUTPUT = PROJECT_ROOT / "data" / "mock" / "db.json"
REFERENCE_TIME = datetime(2025, 1, 1, 12, 0, 0)

FIRST_NAMES = [
    "Alex", "Jordan", "Sam", "Taylor", "Morgan", "Casey", "Riley", "Jamie",
    "Avery", "Quinn", "Harper", "Rowan", "Emerson", "Finley", "Dakota",
]
LAST_NAMES = [
    "Kim", "Lee", "Park", "Smith", "Garcia", "Nguyen", "Patel", "Cohen",
    "Silva", "Brown", "Tanaka", "Novak", "Okafor", "Rossi", "Jensen",
]
EMAIL_DOMAINS = ["example.com", "example.org", "example.net"]
WORDS = [
    "lorem", "ipsum", "dolor", "sit", "amet", "consectetur", "adipiscing",
    "elit", "sed", "do", "eiusmod", "tempor", "incididunt", "ut", "labore",
    "et", "dolore", "magna", "aliqua", "enim", "minim", "veniam", "quis",
    "nostrud", "exercitation", "ullamco", "laboris", "nisi", "aliquip",
    "commodo", "consequat", "duis", "aute", "irure", "voluptate",
]
TODO_VERBS = ["Review", "Write", "Fix", "Plan", "Update", "Clean up", "Test", "Ship"]
TODO_OBJECTS = [
    "release notes", "login flow", "database backup", "team retro",
    "API docs", "filter panel", "billing report", "onboarding guide",
]


# =============================================================================
# Primitives
# =============================================================================

def _pick(rng: np.random.Generator, items: List[str]) -> str:
    return items[int(rng.integers(len(items)))]


def _sentence(rng: np.random.Generator, min_words: int = 4, max_words: int = 10) -> str:
    count = int(rng.integers(min_words, max_words + 1))
    words = [_pick(rng, WORDS) for _ in range(count)]
    return " ".join(words).capitalize() + "."


def _paragraph(rng: np.random.Generator, sentences: int = 3) -> str:
    return " ".join(_sentence(rng) for _ in range(sentences))


def _past_date(rng: np.random.Generator, days: int = 365) -> str:
    """Random timestamp within ``days`` before the reference time."""
    offset = timedelta(seconds=int(rng.integers(days * 24 * 3600)))
    return (REFERENCE_TIME - offset).isoformat()


# =============================================================================
# Record generators
# =============================================================================

def generate_user(rng: np.random.Generator) -> Dict[str, Any]:
    first, last = _pick(rng, FIRST_NAMES), _pick(rng, LAST_NAMES)
    handle = f"{first}.{last}{int(rng.integers(100))}".lower()
    return {
        "name": f"{first} {last}",
        "email": f"{handle}@{_pick(rng, EMAIL_DOMAINS)}",
        "avatar": f"https://i.pravatar.cc/150?u={handle}",
        "createdAt": _past_date(rng),
    }


def generate_post(rng: np.random.Generator) -> Dict[str, Any]:
    return {
        "title": _sentence(rng),
        "content": "\n\n".join(_paragraph(rng) for _ in range(3)),
        "authorId": int(rng.integers(1, 11)),
        "published": bool(rng.integers(2)),
        "createdAt": _past_date(rng),
        "updatedAt": _past_date(rng, days=30),
    }


def generate_comment(rng: np.random.Generator) -> Dict[str, Any]:
    return {
        "postId": int(rng.integers(1, 21)),
        "userId": int(rng.integers(1, 11)),
        "content": _paragraph(rng, sentences=2),
        "createdAt": _past_date(rng, days=30),
    }


def generate_todo(rng: np.random.Generator) -> Dict[str, Any]:
    """Todo record shaped like the API's create payload plus status."""
    has_description = rng.random() < 0.7
    return {
        "title": f"{_pick(rng, TODO_VERBS)} {_pick(rng, TODO_OBJECTS)}",
        "description": _sentence(rng) if has_description else None,
        "completed": bool(rng.random() < 0.3),
        "createdAt": _past_date(rng, days=90),
    }


# =============================================================================
# Collections
# =============================================================================

def generate_mock_data(generator: MockGenerator, count: int = 10) -> List[Dict[str, Any]]:
    """Call ``generator`` ``count`` times."""
    return [generator() for _ in range(count)]


def with_id(generator: MockGenerator, id: int) -> Dict[str, Any]:
    """One generated record with ``id`` placed first."""
    return {"id": id, **generator()}


def generate_mock_data_with_ids(generator: MockGenerator, count: int = 10) -> List[Dict[str, Any]]:
    """Generate records with sequential ids starting at 1."""
    return [with_id(generator, i + 1) for i in range(count)]


def generate_database(seed: Optional[int] = 42) -> Dict[str, List[Dict[str, Any]]]:
    """Build the full mock database: 10 users, 20 posts, 50 comments."""
    rng = np.random.default_rng(seed)
    return {
        "users": generate_mock_data_with_ids(partial(generate_user, rng), count=10),
        "posts": generate_mock_data_with_ids(partial(generate_post, rng), count=20),
        "comments": generate_mock_data_with_ids(partial(generate_comment, rng), count=50),
    }


def write_database(path: Path = DEFAULT_OUTPUT, seed: Optional[int] = 42) -> Dict[str, int]:
    """Write the mock database as JSON and return per-collection counts."""
    db = generate_database(seed)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(db, indent=2), encoding="utf-8")

    stats = {key: len(items) for key, items in db.items()}
    logger.info(f"Mock database written to {path}: {stats}")
    return stats


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for ``todo-mock-db``."""
    parser = argparse.ArgumentParser(description="Generate a mock JSON database")
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT, help="Output JSON path")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    args = parser.parse_args(argv)

    stats = write_database(args.output, seed=args.seed)

    print(f"Mock database generated at: {args.output}")
    print("Statistics:")
    for key, count in stats.items():
        print(f"   - {key}: {count} items")
    return 0


if __name__ == "__main__":
    sys.exit(main())
