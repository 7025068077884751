from fastapi import Request

from telemed.config import Settings
from telemed.store import Storage


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> Storage:
    return request.app.state.storage
