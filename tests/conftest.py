from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from pistebin.config import Settings
from pistebin.database import PasteDatabase
from pistebin.main import create_app

PUBLIC_DIR = Path(__file__).resolve().parent.parent / "public"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_PATH=str(tmp_path / "pastes.sqlite"),
        STATIC_DIR=str(PUBLIC_DIR),
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def db(tmp_path):
    database = PasteDatabase(str(tmp_path / "store.sqlite"))
    database.open()
    yield database
    database.close()
