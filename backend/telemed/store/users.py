from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncEngine

from telemed.models.user import User, UserCreate


class UsersStore:
    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def create(self, user: UserCreate) -> User:
        """Insert one row and return it with the database-assigned id and created_at.

        Errors from the driver, including cancellation by the caller's
        deadline, propagate unchanged. The transaction is rolled back on
        any failure, so no row is left behind.
        """
        stmt = (
            insert(User)
            .values(
                username=user.username,
                email=user.email,
                password=user.password,
                role=user.role,
            )
            .returning(User.id, User.created_at)
        )
        async with self._engine.begin() as conn:
            row = (await conn.execute(stmt)).one()
        return User(
            id=row.id,
            username=user.username,
            email=user.email,
            password=user.password,
            role=user.role,
            created_at=row.created_at,
        )
