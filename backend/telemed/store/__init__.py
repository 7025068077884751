"""Storage facade: per-entity stores behind narrow interfaces."""

from dataclasses import dataclass
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncEngine

from telemed.models.user import User, UserCreate
from telemed.store.users import UsersStore


class UsersRepository(Protocol):
    async def create(self, user: UserCreate) -> User: ...


@dataclass(frozen=True)
class Storage:
    users: UsersRepository


def new_storage(engine: AsyncEngine) -> Storage:
    """Bind an engine to the entity stores. The caller keeps ownership of the engine."""
    return Storage(users=UsersStore(engine))


__all__ = [
    "Storage",
    "UsersRepository",
    "UsersStore",
    "new_storage",
]
