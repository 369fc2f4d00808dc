"""
Pytest configuration and shared record types.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

import pytest

from envrecord import U32


class Mode(enum.Enum):
    foo = 1
    bar = 2


@dataclass
class BasicConfig:
    int: U32
    str: str
    boolean: bool
    opt: Optional[str] = None
    default: str = "default"


@dataclass
class EnumConfig:
    int: U32
    str: str
    boolean: bool
    enummy: Mode
    opt: Optional[str] = None
    default: str = "default"


@pytest.fixture
def basic_config():
    return BasicConfig


@pytest.fixture
def enum_config():
    return EnumConfig


@pytest.fixture
def mode():
    return Mode


@pytest.fixture
def local_enum_config():
    """Record whose postponed annotation names an enum local to this function."""
    class Local(enum.Enum):
        a = 1

    @dataclass
    class LocalConfig:
        mode: Local

    return LocalConfig


@pytest.fixture
def app_env():
    """Environment mapping shared by the prefixed scenarios."""
    return {
        "APP_INT": "1",
        "APP_STR": "str",
        "APP_BOOLEAN": "true",
    }
