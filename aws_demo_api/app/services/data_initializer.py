"""
Sample data for a fresh store.

``initialize_sample_data`` runs once during application startup.  When
the users table is empty it inserts three well‑known users and prints a
confirmation line to standard output; on later starts it leaves the
store untouched.
"""

import logging
from typing import List, Tuple

from ..schemas.user import User
from .user_repository import UserRepository

logger = logging.getLogger(__name__)

SAMPLE_USERS: List[Tuple[str, str]] = [
    ("John Doe", "john.doe@example.com"),
    ("Jane Smith", "jane.smith@example.com"),
    ("Bob Johnson", "bob.johnson@example.com"),
]

SEED_MESSAGE = "Sample data initialized successfully!"


def initialize_sample_data(repository: UserRepository) -> int:
    """Seed an empty store and return the number of users inserted."""
    if repository.count() != 0:
        logger.debug("Users table already populated; skipping sample data")
        return 0
    for name, email in SAMPLE_USERS:
        repository.save(User(name=name, email=email))
    print(SEED_MESSAGE, flush=True)
    logger.info("Inserted %d sample users", len(SAMPLE_USERS))
    return len(SAMPLE_USERS)
