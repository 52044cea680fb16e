"""
Pytest configuration for the table viewer.

Provides fixtures for:
- sample records shaped like the users endpoint
- a settings cache that is cleared around each test
"""

from __future__ import annotations

import pytest

from json_table_viewer.config import get_settings


def make_user(user_id: int, name: str, city: str = "Gwenborough", **extra) -> dict:
    record = {
        "id": user_id,
        "name": name,
        "username": name.split()[0],
        "email": f"{name.split()[0].lower()}@example.org",
        "address": {
            "street": "Kulas Light",
            "city": city,
            "geo": {"lat": "-37.3159", "lng": "81.1496"},
        },
        "phone": "1-770-736-8031",
        "company": {"name": "Romaguera-Crona"},
    }
    record.update(extra)
    return record


@pytest.fixture
def users() -> list[dict]:
    """Twelve homogeneous records with nested address and company."""
    names = [
        "Leanne Graham", "Ervin Howell", "Clementine Bauch", "Patricia Lebsack",
        "Chelsey Dietrich", "Dennis Schulist", "Kurtis Weissnat", "Nicholas Runolfsdottir",
        "Glenna Reichert", "Clementina DuBuque", "Ada Lovelace", "Grace Hopper",
    ]
    return [make_user(i + 1, name) for i, name in enumerate(names)]


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
