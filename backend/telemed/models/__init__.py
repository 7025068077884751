from telemed.models.user import User, UserCreate, UserRole

__all__ = [
    "User",
    "UserCreate",
    "UserRole",
]
