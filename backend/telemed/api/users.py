import asyncio
import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from sqlalchemy.exc import IntegrityError

from telemed.api.deps import get_settings, get_storage
from telemed.config import Settings
from telemed.models.user import UserCreate, UserRole
from telemed.security import hash_password
from telemed.store import Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


class CreateUserRequest(BaseModel):
    username: str = Field(min_length=3, max_length=255)
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+$", max_length=255)
    # bcrypt only looks at the first 72 bytes
    password: str = Field(min_length=8, max_length=72)
    role: UserRole = UserRole.PATIENT


class UserResponse(BaseModel):
    id: int
    username: str
    email: str
    role: str
    created_at: datetime


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(
    body: CreateUserRequest,
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
):
    new_user = UserCreate(
        username=body.username,
        email=body.email,
        password=hash_password(body.password),
        role=body.role.value,
    )
    try:
        async with asyncio.timeout(settings.db_query_timeout):
            user = await storage.users.create(new_user)
    except IntegrityError:
        raise HTTPException(status_code=409, detail="Username or email already exists")
    except TimeoutError:
        logger.warning(f"Timed out creating user {body.username!r}")
        raise HTTPException(status_code=504, detail="Database timeout")

    logger.info(f"Created user {user.id} with role {user.role}")
    return user
