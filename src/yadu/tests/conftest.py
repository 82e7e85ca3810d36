"""Shared fixtures for yadu tests."""

from __future__ import annotations

import io
from datetime import datetime, timezone

import pytest
from pydantic import BaseModel, Field

from yadu import Attr, Group, Handler, Record, attrs_from
from yadu.foundation.config import clear_settings_cache

# Renders as "2024-03-01T03:04.05 UTC" with the default time format
FIXED_TIME = datetime(2024, 3, 1, 15, 4, 5, tzinfo=timezone.utc)


class Ammo(BaseModel):
    forweapon: str
    impact: int = 0
    cost: int = 0
    range: float = 0

    def log_value(self) -> Group:
        return Group((Attr("forweapon", "Use weapon: " + self.forweapon),))


class Enemy(BaseModel):
    alive: bool
    health: int
    name: str
    body: str = Field(default="", exclude=True)
    ammo: list[Ammo] = Field(default_factory=list)


def get_enemy() -> Enemy:
    return Enemy(alive=True, health=10, name="Bodo", body="body\nbody\n",
                 ammo=[Ammo(forweapon="Railgun", range=400, impact=100, cost=100000)])


def get_ammo() -> Ammo:
    return Ammo(forweapon="Axe", range=50, impact=1, cost=50)


def attack(level: int, *args: object, time: datetime | None = FIXED_TIME, **kw: object) -> Record:
    """The record most tests render: an attack with an enemy and some ammo."""
    return Record(level, "attack", time, attrs_from("enemy", get_enemy(), "ammo", get_ammo(), *args, **kw))


@pytest.fixture
def buf() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def plain(buf: io.StringIO) -> Handler:
    """Root handler without colors writing to ``buf``."""
    return Handler.create(buf, colors=False)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> object:
    """Isolate tests from YADU_* variables of the surrounding environment."""
    for var in ("YADU_LEVEL", "YADU_TIME_FORMAT", "YADU_ADD_SOURCE", "YADU_NO_COLOR", "NO_COLOR"):
        monkeypatch.delenv(var, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()
