"""Mock data and database seeding."""

from .generators import (
    generate_mock_data,
    with_id,
    generate_mock_data_with_ids,
    generate_user,
    generate_post,
    generate_comment,
    generate_todo,
    generate_database,
    write_database,
)

__all__ = [
    "generate_mock_data",
    "with_id",
    "generate_mock_data_with_ids",
    "generate_user",
    "generate_post",
    "generate_comment",
    "generate_todo",
    "generate_database",
    "write_database",
]
