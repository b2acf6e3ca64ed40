"""Fixtures compartidas: settings aislados del entorno y contenido de ejemplo."""

from __future__ import annotations

import os

import pytest

from core.config import AppSettings
from core.domain.content import Post


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    # Ni .env del proyecto ni variables del usuario deben filtrarse en los tests.
    for key in list(os.environ):
        if key.upper().startswith("ADMIN_EDITOR_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def post() -> Post:
    return Post(
        id=7,
        uuid="6f1c9a52-0d4e-4d7e-9a55-3b3f0d6c2b11",
        slug="hello-world",
        title='Hello "World"',
        body="<p>Hi & bye</p>",
        photo="/api/uploads/2024/01/cover.png",
        author="Ada",
        category=["news", "product"],
        tags=["python", "cms"],
        status="review",
        publish_date=1700000000000,
    )
