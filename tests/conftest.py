"""Shared fixtures: a fresh application per test, seeded from a temp file."""

import json

import pytest
from fastapi.testclient import TestClient

from special_ed_api.app.core.config import Settings
from special_ed_api.app.main import create_app


SEED = [
    {"id": "1", "name": "Lucas", "age": 9, "parents": "Fernanda", "phone": "111", "special": "TDAH", "status": "ativo"},
    {"id": "2", "name": "beatriz", "age": 7, "parents": "Cláudia", "phone": "222", "special": "TEA", "status": "ativo"},
    {"id": "3", "name": "Arthur", "age": 10, "parents": "Sandra", "phone": "333", "special": "Down", "status": "inativo",
     "observacoes": "sala 2"},
]


@pytest.fixture
def seed_file(tmp_path):
    path = tmp_path / "students.json"
    path.write_text(json.dumps(SEED), encoding="utf-8")
    return path


@pytest.fixture
def settings(seed_file):
    return Settings(data_file=str(seed_file), write_back=False)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def new_student():
    """A valid, fully populated payload that is not in the seed."""
    return {"id": "x1", "name": "Ana", "age": 7, "parents": "p", "phone": "1", "special": "s", "status": "active"}
