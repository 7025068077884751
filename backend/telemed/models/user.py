from datetime import datetime
from enum import Enum

from pydantic import model_serializer
from sqlalchemy import Column, DateTime, func
from sqlmodel import Field, SQLModel


class UserRole(str, Enum):
    DISTRICT_DOCTOR = "district_doctor"
    SPECIALIST_DOCTOR = "specialist_doctor"
    NURSE = "nurse"
    PATIENT = "patient"


class UserBase(SQLModel):
    username: str = Field(unique=True, index=True)
    email: str = Field(unique=True, index=True)
    role: str


class UserCreate(UserBase):
    password: str


class User(UserBase, table=True):
    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    password: str
    # assigned by the database on insert
    created_at: datetime | None = Field(
        default=None,
        sa_column=Column(
            DateTime(timezone=True), nullable=False, server_default=func.now()
        ),
    )

    @model_serializer(mode="wrap")
    def _without_password(self, handler):
        """Password is write-only: readable as an attribute, never dumped."""
        data = handler(self)
        data.pop("password", None)
        return data
