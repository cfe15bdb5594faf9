"""
FastAPI dependencies giving handlers the store and settings of their app.
"""
from fastapi import Request

from pistebin.config import Settings
from pistebin.database import PasteDatabase


def get_db(request: Request) -> PasteDatabase:
    return request.app.state.db


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
