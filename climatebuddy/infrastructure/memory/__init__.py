"""In-memory store implementations seeded from the bundled user file."""

from .account_repository import InMemoryAccountRepository
from .seed import SeedData, load_seed, parse_seed
from .session_repository import InMemorySessionRepository

__all__ = [
    "InMemoryAccountRepository",
    "InMemorySessionRepository",
    "SeedData",
    "load_seed",
    "parse_seed",
]
